"""Translation strings for all user-facing messages.

All strings are organized by category for easy maintenance.
Keys use dot notation for organization (e.g., 'menu.venues').
Headings may use Telegram Markdown; button labels and toasts stay plain.
"""

from typing import Dict

# Translation dictionary: language code -> key -> translated string
STRINGS: Dict[str, Dict[str, str]] = {
    "tr": {
        # Main menu buttons
        "menu.venues": "🏟️ Tesisler",
        "menu.reservations": "📅 Rezervasyonlarım",
        "menu.social": "👥 Takım & Maç",
        "menu.social_pending": "👥 Takım & Maç ({count} davet)",
        "menu.profile": "👤 Profil",
        "menu.admin_panel": "👮 Yönetim Paneli",
        "menu.language": "🌐 Dil",
        "menu.logout": "🚪 Çıkış Yap",

        # Navigation buttons
        "nav.back_to_menu": "🔙 Ana Menü",
        "nav.back": "🔙 Geri",
        "nav.cancel": "İptal",
        "nav.previous": "⬅️ Önceki",
        "nav.next": "Sonraki ➡️",
        "nav.page_label": "Sayfa {page}/{total}",

        # Generic actions
        "action.confirm": "✅ Onayla",
        "action.yes": "✅ Evet",
        "action.no": "❌ Hayır",
        "action.reject": "❌ Reddet",
        "action.retry": "🔄 Tekrar Dene",

        # Welcome
        "welcome.title": "⚽ Hoş geldin, {name}!",
        "welcome.message": "Ne yapmak istersin?",

        # Authentication
        "auth.welcome": "⚽ *Halısaha*\n\nSaha kiralamak ve maç bulmak için giriş yap ya da kayıt ol.",
        "auth.login_button": "🔑 Giriş Yap",
        "auth.register_button": "📝 Kayıt Ol",
        "auth.enter_email": "📧 E-posta adresini yaz:",
        "auth.enter_password": "🔒 Şifreni yaz:",
        "auth.register_email": "📝 Kayıt için e-posta adresini yaz:",
        "auth.register_password": "🔒 En az 6 karakterlik bir şifre belirle:",
        "auth.enter_first_name": "👤 Adını yaz:",
        "auth.enter_last_name": "👤 Soyadını yaz:",
        "auth.signed_in": "Tekrar hoş geldin, {name}!",
        "auth.registered": "Kaydın tamamlandı, {name}!",
        "auth.logged_out": "👋 Çıkış yaptın.",
        "auth.login_required": "🔐 Bu işlem için giriş yapmalısın.",
        "auth.session_expired": "🔐 Oturumunun süresi doldu. Lütfen tekrar giriş yap.",

        # Language
        "language.title": "🌐 Dil seç:",
        "language.changed": "Dil Türkçe olarak ayarlandı.",

        # Venues
        "venues.title": "🏟️ *Tesisler*",
        "venues.count": "{count} tesis bulundu",
        "venues.empty": "Filtrelere uyan tesis bulunamadı.",
        "venues.filter_search": "🔎 Arama: {value}",
        "venues.filter_city": "🏙️ Şehir: {value}",
        "venues.filter_district": "📍 İlçe: {value}",
        "venues.filter_sort": "↕️ Sıralama: {value}",
        "venues.search_button": "🔎 Ara",
        "venues.city_button": "🏙️ Şehir",
        "venues.district_button": "📍 İlçe",
        "venues.sort_button": "↕️ Sırala",
        "venues.clear_button": "🧹 Temizle",
        "venues.search_prompt": "🔎 Tesis adı veya adresinden bir kelime yaz:",
        "venues.choose_city": "🏙️ Şehir seç:",
        "venues.choose_district": "📍 İlçe seç:",
        "venues.choose_sort": "↕️ Sıralama seç:",
        "venues.any_option": "Tümü",
        "venues.sort_name": "Ada göre",
        "venues.sort_price-low": "Fiyat (artan)",
        "venues.sort_price-high": "Fiyat (azalan)",
        "venues.sort_rating": "Puana göre",
        "venues.address": "📍 Adres",
        "venues.phone": "📞 Telefon",
        "venues.price": "💰 Saatlik ücret",
        "venues.rating": "⭐ {rating} ({count} değerlendirme)",
        "venues.fields_title": "Sahalar:",
        "venues.no_fields": "Bu tesiste kiralanabilir saha yok.",
        "venues.book_field": "📅 {name} rezerve et",

        # Booking
        "booking.title": "📅 *Rezervasyon*",
        "booking.date_prompt": "Bir tarih seç:",
        "booking.change_date": "📆 Tarihi Değiştir",
        "booking.slots_title": "🕐 *Müsait saatler: {date}*",
        "booking.slots_prompt": "Başlangıç saatini seç (❌ dolu):",
        "booking.no_slots": "Bu tarihte boş saat kalmadı.",
        "booking.hours_option": "{hours} saat",
        "booking.duration": "⏱️ Süre",
        "booking.duration_prompt": "{start} için süre seç:",
        "booking.total": "💰 Toplam",
        "booking.venue": "🏟️ Tesis",
        "booking.field": "⚽ Saha",
        "booking.date": "📅 Tarih",
        "booking.time": "🕐 Saat",
        "booking.confirm_title": "📝 *Rezervasyon Özeti*",
        "booking.confirm_prompt": "Onaylıyor musun?",
        "booking.success_title": "✅ *Rezervasyon oluşturuldu*",
        "booking.created": "Rezervasyonun oluşturuldu.",
        "booking.submitting": "⏳ Rezervasyon gönderiliyor...",
        "booking.submit_in_progress": "Rezervasyon zaten gönderiliyor, lütfen bekle.",
        "booking.slot_taken": "Bu saat az önce başkası tarafından alındı. Müsaitlik yenilendi.",
        "booking.slot_unavailable": "⚠️ Bu saat artık müsait değil, başka bir saat seç.",
        "booking.past_date": "⚠️ Geçmiş bir tarih seçilemez.",
        "booking.load_failed": "Müsaitlik yüklenemedi.",
        "booking.field_missing": "⚠️ Saha bulunamadı. Tesis listesine dönüp tekrar dene.",
        "booking.cancelled": "Rezervasyon iptal edildi, hiçbir şey gönderilmedi.",
        "booking.expired": "⌛ Bu rezervasyon ekranı artık geçerli değil. Baştan başla.",

        # Week days
        "day.monday": "Pzt",
        "day.tuesday": "Sal",
        "day.wednesday": "Çar",
        "day.thursday": "Per",
        "day.friday": "Cum",
        "day.saturday": "Cmt",
        "day.sunday": "Paz",

        # Reservation / proposal statuses
        "status.pending": "Beklemede",
        "status.confirmed": "Onaylandı",
        "status.cancelled": "İptal edildi",
        "status.completed": "Tamamlandı",
        "status.no_show": "Gelinmedi",
        "status.accepted": "Kabul edildi",
        "status.rejected": "Reddedildi",
        "status.expired": "Süresi doldu",

        # Payment statuses
        "payment.pending": "Ödeme bekleniyor",
        "payment.pre_authorized": "Ön provizyon alındı",
        "payment.paid": "Ödendi",
        "payment.refunded": "İade edildi",
        "payment.failed": "Ödeme başarısız",

        # Roles
        "role.player": "Oyuncu",
        "role.venue_owner": "Tesis Sahibi",
        "role.admin": "Yönetici",

        # Reservations
        "reservations.title": "📅 *Rezervasyonlarım*",
        "reservations.count": "{count} rezervasyon",
        "reservations.empty": "Henüz rezervasyonun yok. Tesisler menüsünden saha kiralayabilirsin.",
        "reservations.detail_title": "📋 *Rezervasyon Detayı*",
        "reservations.status": "📌 Durum",
        "reservations.payment": "💳 Ödeme",
        "reservations.team": "👥 Takım",
        "reservations.cancel_button": "🗑️ İptal Et",
        "reservations.cancel_yes": "✅ Evet, iptal et",
        "reservations.cancel_confirm": "{date} {start} rezervasyonunu iptal etmek istediğine emin misin?",
        "reservations.cancelled": "Rezervasyon iptal edildi.",
        "reservations.cannot_cancel": "Bu rezervasyon iptal edilemez.",

        # Social
        "social.title": "👥 Takım & Maç",
        "social.invitations": "📨 Takım Davetleri",
        "social.invitations_title": "📨 *Takım Davetleri*",
        "social.no_invitations": "Bekleyen davetin yok.",
        "social.invitation_line": "{team} (davet eden: {inviter})",
        "social.new_invitation_title": "📨 *Yeni takım daveti*",
        "social.open_invitations": "📨 Davetleri Gör",
        "social.invitation_accepted": "Davet kabul edildi.",
        "social.invitation_rejected": "Davet reddedildi.",
        "social.proposals": "🤝 Maç Teklifleri",
        "social.proposals_title": "🤝 *Maç Teklifleri*",
        "social.received": "Gelen",
        "social.sent": "Gönderilen",
        "social.no_proposals": "Maç teklifi yok.",
        "social.proposal_accepted": "Maç teklifi kabul edildi.",
        "social.proposal_rejected": "Maç teklifi reddedildi.",
        "social.my_team": "🛡️ Takımım",
        "social.team_title": "🛡️ *Takımım*",
        "social.no_team": "Henüz bir takımın yok.",
        "social.members": "Üyeler ({count}):",
        "social.player_search": "🔍 Oyuncu Arayanlar",
        "social.player_search_title": "🔍 *Oyuncu arayan maçlar*",
        "social.no_player_searches": "Şu anda oyuncu arayan maç yok.",
        "social.player_search_line": "{when} ({spots} kişi aranıyor)",
        "social.join_button": "🙋 Katıl: {when}",
        "social.join_requested": "Katılma isteğin gönderildi.",

        # Ratings
        "ratings.rate_players": "⭐ Oyuncuları Puanla",
        "ratings.title": "⭐ *Oyuncu Puanlama*",
        "ratings.no_players": "Puanlanacak oyuncu yok.",
        "ratings.overview_prompt": "Puanlamak istediğin oyuncuyu seç:",
        "ratings.pending_count": "{count} oyuncu, {edited} düzenlendi",
        "ratings.editor_title": "⭐ *{name}*",
        "ratings.speed": "Hız",
        "ratings.technique": "Teknik",
        "ratings.passing": "Pas",
        "ratings.physical": "Fizik",
        "ratings.showed_up": "Maça geldi",
        "ratings.was_late": "Geç kaldı",
        "ratings.caused_trouble": "Sorun çıkardı",
        "ratings.comment_button": "💬 Yorum",
        "ratings.comment_prompt": "💬 Bu oyuncu için kısa bir yorum yaz (en fazla 500 karakter):",
        "ratings.done": "✅ Tamam",
        "ratings.save": "💾 Kaydet",
        "ratings.nothing_to_submit": "Henüz kimseyi puanlamadın. Göndermeden önce en az bir oyuncuyu puanla veya kaydet.",
        "ratings.submit_all": "📤 Tümünü Gönder",
        "ratings.submitted": "{count} puanlama gönderildi.",
        "ratings.partial_failure": "⚠️ {failed} puanlama gönderilemedi: {reason}\nGönderilemeyenler listede kaldı, tekrar deneyebilirsin.",
        "ratings.partial_failure_short": "{failed} puanlama gönderilemedi.",

        # Profile
        "profile.email": "📧 E-posta",
        "profile.phone": "📞 Telefon",
        "profile.role": "🎭 Rol",
        "profile.not_set": "Belirtilmemiş",
        "profile.elo": "📈 ELO",
        "profile.trust": "🤝 Güven puanı",
        "profile.matches": "⚽ Oynanan maç",
        "profile.streaks": "🔥 Seri: {current} (en uzun {longest})",
        "profile.has_picture": "🖼️ Profil fotoğrafı yüklü",
        "profile.ratings_title": "⭐ *Aldığın Puanlar*",
        "profile.no_ratings": "Henüz puanlanmadın.",
        "profile.ratings_overall": "Genel: {overall} ({count} puanlama)",
        "profile.edit_first_name": "✏️ Ad",
        "profile.edit_last_name": "✏️ Soyad",
        "profile.edit_phone": "📞 Telefon",
        "profile.change_password": "🔒 Şifre Değiştir",
        "profile.upload_picture": "🖼️ Fotoğraf Yükle",
        "profile.enter_first_name": "✏️ Yeni adını yaz:",
        "profile.enter_last_name": "✏️ Yeni soyadını yaz:",
        "profile.enter_phone": "📞 Telefon numaranı yaz (05XXXXXXXXX):",
        "profile.updated": "Profil güncellendi.",
        "profile.enter_current_password": "🔒 Mevcut şifreni yaz:",
        "profile.enter_new_password": "🔒 Yeni şifreni yaz (en az 6 karakter):",
        "profile.confirm_new_password": "🔒 Yeni şifreni tekrar yaz:",
        "profile.password_changed": "Şifren değiştirildi.",
        "profile.send_picture": "🖼️ Profil fotoğrafı olarak bir resim gönder (en fazla 5 MB).",
        "profile.picture_uploaded": "Profil fotoğrafı yüklendi.",

        # Admin
        "admin.title": "👮 *Yönetim Paneli*",
        "admin.shutting_down": "🛑 Bot kapatılıyor...",
        "admin.stat_users": "👤 Kullanıcı: {total} ({active} aktif)",
        "admin.stat_venues": "🏟️ Tesis: {total}",
        "admin.stat_reservations": "📅 Rezervasyon: {total} ({pending} beklemede)",
        "admin.stat_revenue": "💰 Gelir: {amount}",
        "admin.statistics": "📊 İstatistikler",
        "admin.statistics_title": "📊 *İstatistikler*",
        "admin.user_types": "Kullanıcı tipleri:",
        "admin.popular_venues": "Popüler tesisler:",
        "admin.monthly_revenue": "Aylık gelir:",
        "admin.daily_reservations": "Günlük rezervasyonlar:",
        "admin.no_statistics": "Henüz istatistik yok.",
        "admin.users": "👤 Kullanıcılar",
        "admin.reservations": "📅 Rezervasyonlar",
        "admin.teams": "🛡️ Takımlar",
        "admin.users_title": "👤 *Kullanıcılar*",
        "admin.reservations_title": "📅 *Tüm Rezervasyonlar*",
        "admin.teams_title": "🛡️ *Takımlar*",
        "admin.filter_all": "Tümü",
        "admin.filter_search": "🔎 Arama: {value}",
        "admin.filter_type": "🎭 Tip: {value}",
        "admin.filter_status": "📌 Durum: {value}",
        "admin.list_empty": "Kayıt bulunamadı.",
        "admin.list_total": "Toplam {total} kayıt",
        "admin.search_button": "🔎 Ara",
        "admin.search_prompt": "🔎 Aranacak ifadeyi yaz:",
        "admin.account_status": "📌 Hesap",
        "admin.active": "Aktif",
        "admin.inactive": "Pasif",
        "admin.activate": "✅ Aktifleştir",
        "admin.deactivate": "⛔ Pasifleştir",
        "admin.delete": "🗑️ Sil",
        "admin.delete_locked": "🔒 Silinemez",
        "admin.customer": "👤 Müşteri",
        "admin.captain": "🧢 Kaptan",
        "admin.user_activated": "Kullanıcı aktifleştirildi.",
        "admin.user_deactivated": "Kullanıcı pasifleştirildi.",
        "admin.user_type_changed": "Kullanıcı tipi {role} olarak değiştirildi.",
        "admin.delete_user_confirm": "{name} kalıcı olarak silinsin mi?",
        "admin.user_deleted": "Kullanıcı silindi.",
        "admin.status_updated": "Durum {status} olarak güncellendi.",
        "admin.delete_team_confirm": "{name} takımı kalıcı olarak silinsin mi?",
        "admin.team_deleted": "Takım silindi.",

        # Toasts
        "toast.dismiss": "✖️ Kapat",

        # Validation
        "validation.try_again": "Lütfen tekrar dene.",
        "validation.email_missing_at": "E-posta adresinde @ işareti olmalı.",
        "validation.email_domain": "E-posta adresinin alan adı geçersiz.",
        "validation.email_invalid": "Geçerli bir e-posta adresi gir.",
        "validation.phone_too_short": "Telefon numarası çok kısa.",
        "validation.phone_too_long": "Telefon numarası çok uzun.",
        "validation.name_empty": "İsim boş olamaz.",
        "validation.name_too_short": "İsim en az 2 karakter olmalı.",
        "validation.name_too_long": "İsim en fazla 50 karakter olabilir.",
        "validation.name_invalid": "İsim yalnızca harf içerebilir.",
        "validation.password_too_short": "Şifre en az 6 karakter olmalı.",
        "validation.password_mismatch": "Şifreler eşleşmiyor.",
        "validation.search_too_long": "Arama ifadesi en fazla 100 karakter olabilir.",
        "validation.upload_not_image": "Yalnızca resim dosyası yüklenebilir.",
        "validation.upload_too_large": "Dosya 5 MB sınırını aşıyor.",
        "validation.invalid_choice": "Geçersiz seçim.",
        "validation.admin_delete_blocked": "Yönetici hesapları silinemez.",

        # Team screen
        "teams.record": "🏆 {matches} maç, {wins} galibiyet (%{rate})",
        "teams.has_logo": "🖼️ Takım logosu yüklü",
        "teams.create_button": "➕ Takım Kur",
        "teams.enter_name": "🛡️ Takımının adını yaz:",
        "teams.created": "Takım kuruldu.",
        "teams.edit_description": "📝 Açıklama",
        "teams.enter_description": "📝 Takım açıklamasını yaz:",
        "teams.updated": "Takım bilgileri güncellendi.",
        "teams.invite_button": "➕ Oyuncu Davet Et",
        "teams.enter_username": "🔎 Davet etmek istediğin oyuncunun kullanıcı adını yaz:",
        "teams.candidates_title": "🔎 *\"{term}\" için oyuncular*",
        "teams.no_candidates": "Bu kullanıcı adıyla oyuncu bulunamadı.",
        "teams.has_team": "(takımı var)",
        "teams.invite_player": "➕ {name} davet et",
        "teams.invited": "{name} takıma davet edildi.",
        "teams.search_again": "🔎 Yeniden Ara",
        "teams.upload_logo": "🖼️ Logo",
        "teams.send_logo": "🖼️ Takım logosu olarak bir fotoğraf gönder (en fazla 5 MB).",
        "teams.logo_uploaded": "Takım logosu güncellendi.",
        "teams.notifications": "🔔 Bildirimler",
        "teams.notifications_title": "🔔 *Takım Bildirimleri*",
        "teams.no_notifications": "Bildirim yok.",
        "teams.mark_all_read": "✔️ Tümünü okundu işaretle",

        # Opponent search
        "social.opponents": "⚔️ Rakip Bul",
        "opponents.title": "⚔️ *Rakip arayan takımlar*",
        "opponents.empty": "Şu anda rakip arayan takım yok.",
        "opponents.count": "{count} ilan",
        "opponents.my_listings": "📋 İlanlarım",
        "opponents.create_button": "➕ İlan Aç",
        "opponents.my_title": "📋 *Takımımın ilanları*",
        "opponents.my_empty": "Takımının açık ilanı yok.",
        "opponents.dates": "📅 Tarih aralığı",
        "opponents.match_type": "🎯 Maç türü",
        "opponents.type_friendly": "Dostluk",
        "opponents.type_competitive": "Rekabetçi",
        "opponents.duration": "⏱️ Süre",
        "opponents.minutes": "{minutes} dk",
        "opponents.enter_title": "📝 İlan başlığını yaz:",
        "opponents.enter_date_start": "📅 En erken tarih (YYYY-AA-GG):",
        "opponents.enter_date_end": "📅 En geç tarih (YYYY-AA-GG):",
        "opponents.choose_match_type": "🎯 Maç türünü seç:",
        "opponents.created": "İlan yayınlandı.",
        "opponents.propose_button": "🤝 Maç Teklif Et",
        "opponents.enter_proposal_date": "📅 Maç tarihi ({start} - {end} arası, YYYY-AA-GG):",
        "opponents.enter_proposal_time": "🕒 Maç saati (SS:DD):",
        "opponents.proposal_sent": "Maç teklifin gönderildi.",

        # Players wanted
        "player_search.filter_position": "🎽 Mevki: {value}",
        "player_search.position_button": "🎽 Mevki",
        "player_search.choose_city": "🏙️ Şehir seç:",
        "player_search.choose_district": "📍 İlçe seç:",
        "player_search.choose_playerPosition": "🎽 Mevki seç:",
        "player_search.positions": "Mevkiler",
        "player_search.leave_button": "🚪 Ayrıl: {when}",
        "player_search.left": "İlandan ayrıldın.",
        "player_search.mine_button": "📋 İlanlarım",
        "player_search.mine_title": "📋 *Oyuncu aradığım maçlar*",
        "player_search.mine_empty": "Açtığın bir ilan yok.",
        "player_search.cancel_button": "🗑️ Kapat: {when}",
        "player_search.cancelled": "İlan kapatıldı.",
        "player_search.find_players": "🔍 Oyuncu Ara",
        "player_search.requests_button": "🙋 Katılım İstekleri",
        "player_search.enter_players_needed": "👥 Kaç oyuncu arıyorsun? (1-22)",
        "player_search.enter_description": "📝 Kısa bir açıklama yaz (seviye, mevki, not):",
        "player_search.created": "Oyuncu arama ilanın yayınlandı.",
        "player_search.requests_title": "🙋 *Katılım İstekleri*",
        "player_search.no_requests": "Henüz katılım isteği yok.",
        "player_search.request_accepted": "İstek kabul edildi.",
        "player_search.request_rejected": "İstek reddedildi.",

        # Reservation periods
        "reservations.period_all": "Tümü",
        "reservations.period_upcoming": "Yaklaşan",
        "reservations.period_past": "Geçmiş",

        # Admin venues
        "admin.venues": "🏟️ Tesisler",
        "admin.venues_title": "🏟️ *Tesis Yönetimi*",
        "admin.venue_create": "➕ Tesis Ekle",
        "admin.venue_enter_name": "🏟️ Tesis adını yaz:",
        "admin.venue_enter_location": "📍 Tesis adresini yaz:",
        "admin.venue_enter_price": "💰 Saatlik ücreti yaz (₺):",
        "admin.venue_created": "Tesis eklendi.",
        "admin.venue_hours": "🕒 Çalışma saatleri",
        "admin.venue_price": "💰 Ücret",
        "admin.venue_updated": "Tesis güncellendi.",
        "admin.venue_activated": "Tesis yayına alındı.",
        "admin.venue_deactivated": "Tesis yayından kaldırıldı.",
        "admin.delete_venue_confirm": "{name} tesisi kalıcı olarak silinsin mi?",
        "admin.venue_deleted": "Tesis silindi.",

        "validation.team_name_required": "Takım adı gerekli.",
        "validation.search_empty": "Bir kullanıcı adı yaz.",
        "validation.listing_required": "Başlık ve tarih aralığı gerekli.",
        "validation.date_invalid": "Tarihi YYYY-AA-GG biçiminde yaz.",
        "validation.date_range": "Bitiş tarihi başlangıçtan önce olamaz.",
        "validation.time_invalid": "Saati SS:DD biçiminde yaz.",
        "validation.players_needed": "Oyuncu sayısı 1 ile 22 arasında olmalı.",
        "validation.description_required": "Açıklama gerekli.",
        "validation.venue_required": "Tesis adı ve adresi gerekli.",
        "validation.price_invalid": "Geçerli, sıfırdan büyük bir ücret yaz.",

        # Errors
        "error.generic": "Bir hata oluştu.",
        "error.network": "📡 Sunucuya ulaşılamıyor. Bağlantını kontrol edip tekrar dene.",
        "error.unexpected": "❌ Beklenmeyen bir hata oluştu. Lütfen tekrar dene.",
        "error.access_denied": "⛔ Bu bölüme erişim yetkin yok.",
    },
    "en": {
        # Main menu buttons
        "menu.venues": "🏟️ Venues",
        "menu.reservations": "📅 My Reservations",
        "menu.social": "👥 Teams & Matches",
        "menu.social_pending": "👥 Teams & Matches ({count} invites)",
        "menu.profile": "👤 Profile",
        "menu.admin_panel": "👮 Admin Panel",
        "menu.language": "🌐 Language",
        "menu.logout": "🚪 Log Out",

        # Navigation buttons
        "nav.back_to_menu": "🔙 Main Menu",
        "nav.back": "🔙 Back",
        "nav.cancel": "Cancel",
        "nav.previous": "⬅️ Previous",
        "nav.next": "Next ➡️",
        "nav.page_label": "Page {page}/{total}",

        # Generic actions
        "action.confirm": "✅ Confirm",
        "action.yes": "✅ Yes",
        "action.no": "❌ No",
        "action.reject": "❌ Reject",
        "action.retry": "🔄 Retry",

        # Welcome
        "welcome.title": "⚽ Welcome, {name}!",
        "welcome.message": "What would you like to do?",

        # Authentication
        "auth.welcome": "⚽ *Halısaha*\n\nSign in or register to book pitches and find matches.",
        "auth.login_button": "🔑 Sign In",
        "auth.register_button": "📝 Register",
        "auth.enter_email": "📧 Enter your email address:",
        "auth.enter_password": "🔒 Enter your password:",
        "auth.register_email": "📝 Enter an email address to register:",
        "auth.register_password": "🔒 Choose a password of at least 6 characters:",
        "auth.enter_first_name": "👤 Enter your first name:",
        "auth.enter_last_name": "👤 Enter your last name:",
        "auth.signed_in": "Welcome back, {name}!",
        "auth.registered": "Registration complete, {name}!",
        "auth.logged_out": "👋 You have logged out.",
        "auth.login_required": "🔐 Please sign in to continue.",
        "auth.session_expired": "🔐 Your session has expired. Please sign in again.",

        # Language
        "language.title": "🌐 Choose a language:",
        "language.changed": "Language set to English.",

        # Venues
        "venues.title": "🏟️ *Venues*",
        "venues.count": "{count} venues found",
        "venues.empty": "No venues match these filters.",
        "venues.filter_search": "🔎 Search: {value}",
        "venues.filter_city": "🏙️ City: {value}",
        "venues.filter_district": "📍 District: {value}",
        "venues.filter_sort": "↕️ Sort: {value}",
        "venues.search_button": "🔎 Search",
        "venues.city_button": "🏙️ City",
        "venues.district_button": "📍 District",
        "venues.sort_button": "↕️ Sort",
        "venues.clear_button": "🧹 Clear",
        "venues.search_prompt": "🔎 Type a word from the venue name or address:",
        "venues.choose_city": "🏙️ Choose a city:",
        "venues.choose_district": "📍 Choose a district:",
        "venues.choose_sort": "↕️ Choose a sort order:",
        "venues.any_option": "Any",
        "venues.sort_name": "By name",
        "venues.sort_price-low": "Price (low to high)",
        "venues.sort_price-high": "Price (high to low)",
        "venues.sort_rating": "By rating",
        "venues.address": "📍 Address",
        "venues.phone": "📞 Phone",
        "venues.price": "💰 Hourly price",
        "venues.rating": "⭐ {rating} ({count} reviews)",
        "venues.fields_title": "Fields:",
        "venues.no_fields": "This venue has no bookable fields.",
        "venues.book_field": "📅 Book {name}",

        # Booking
        "booking.title": "📅 *Booking*",
        "booking.date_prompt": "Choose a date:",
        "booking.change_date": "📆 Change Date",
        "booking.slots_title": "🕐 *Available times: {date}*",
        "booking.slots_prompt": "Choose a start time (❌ taken):",
        "booking.no_slots": "No free times left on this date.",
        "booking.hours_option": "{hours} h",
        "booking.duration": "⏱️ Duration",
        "booking.duration_prompt": "Choose a duration for {start}:",
        "booking.total": "💰 Total",
        "booking.venue": "🏟️ Venue",
        "booking.field": "⚽ Field",
        "booking.date": "📅 Date",
        "booking.time": "🕐 Time",
        "booking.confirm_title": "📝 *Booking Summary*",
        "booking.confirm_prompt": "Do you confirm?",
        "booking.success_title": "✅ *Reservation created*",
        "booking.created": "Your reservation was created.",
        "booking.submitting": "⏳ Submitting your reservation...",
        "booking.submit_in_progress": "Your reservation is already being submitted, please wait.",
        "booking.slot_taken": "This slot was just taken by someone else. Availability refreshed.",
        "booking.slot_unavailable": "⚠️ That time is no longer available, pick another one.",
        "booking.past_date": "⚠️ Dates in the past cannot be booked.",
        "booking.load_failed": "Could not load availability.",
        "booking.field_missing": "⚠️ Field not found. Go back to the venue list and try again.",
        "booking.cancelled": "Booking cancelled, nothing was submitted.",
        "booking.expired": "⌛ This booking screen is no longer valid. Please start again.",

        # Week days
        "day.monday": "Mon",
        "day.tuesday": "Tue",
        "day.wednesday": "Wed",
        "day.thursday": "Thu",
        "day.friday": "Fri",
        "day.saturday": "Sat",
        "day.sunday": "Sun",

        # Reservation / proposal statuses
        "status.pending": "Pending",
        "status.confirmed": "Confirmed",
        "status.cancelled": "Cancelled",
        "status.completed": "Completed",
        "status.no_show": "No-show",
        "status.accepted": "Accepted",
        "status.rejected": "Rejected",
        "status.expired": "Expired",

        # Payment statuses
        "payment.pending": "Awaiting payment",
        "payment.pre_authorized": "Pre-authorized",
        "payment.paid": "Paid",
        "payment.refunded": "Refunded",
        "payment.failed": "Payment failed",

        # Roles
        "role.player": "Player",
        "role.venue_owner": "Venue Owner",
        "role.admin": "Admin",

        # Reservations
        "reservations.title": "📅 *My Reservations*",
        "reservations.count": "{count} reservations",
        "reservations.empty": "You have no reservations yet. Book a pitch from the Venues menu.",
        "reservations.detail_title": "📋 *Reservation Details*",
        "reservations.status": "📌 Status",
        "reservations.payment": "💳 Payment",
        "reservations.team": "👥 Team",
        "reservations.cancel_button": "🗑️ Cancel Reservation",
        "reservations.cancel_yes": "✅ Yes, cancel it",
        "reservations.cancel_confirm": "Are you sure you want to cancel the reservation on {date} at {start}?",
        "reservations.cancelled": "Reservation cancelled.",
        "reservations.cannot_cancel": "This reservation cannot be cancelled.",

        # Social
        "social.title": "👥 Teams & Matches",
        "social.invitations": "📨 Team Invitations",
        "social.invitations_title": "📨 *Team Invitations*",
        "social.no_invitations": "No pending invitations.",
        "social.invitation_line": "{team} (invited by {inviter})",
        "social.new_invitation_title": "📨 *New team invitation*",
        "social.open_invitations": "📨 View Invitations",
        "social.invitation_accepted": "Invitation accepted.",
        "social.invitation_rejected": "Invitation declined.",
        "social.proposals": "🤝 Match Proposals",
        "social.proposals_title": "🤝 *Match Proposals*",
        "social.received": "Received",
        "social.sent": "Sent",
        "social.no_proposals": "No match proposals.",
        "social.proposal_accepted": "Match proposal accepted.",
        "social.proposal_rejected": "Match proposal declined.",
        "social.my_team": "🛡️ My Team",
        "social.team_title": "🛡️ *My Team*",
        "social.no_team": "You are not in a team yet.",
        "social.members": "Members ({count}):",
        "social.player_search": "🔍 Players Wanted",
        "social.player_search_title": "🔍 *Matches looking for players*",
        "social.no_player_searches": "No matches are looking for players right now.",
        "social.player_search_line": "{when} ({spots} spots open)",
        "social.join_button": "🙋 Join: {when}",
        "social.join_requested": "Your join request was sent.",

        # Ratings
        "ratings.rate_players": "⭐ Rate Players",
        "ratings.title": "⭐ *Rate Players*",
        "ratings.no_players": "There are no players to rate.",
        "ratings.overview_prompt": "Choose a player to rate:",
        "ratings.pending_count": "{count} players, {edited} edited",
        "ratings.editor_title": "⭐ *{name}*",
        "ratings.speed": "Speed",
        "ratings.technique": "Technique",
        "ratings.passing": "Passing",
        "ratings.physical": "Physical",
        "ratings.showed_up": "Showed up",
        "ratings.was_late": "Was late",
        "ratings.caused_trouble": "Caused trouble",
        "ratings.comment_button": "💬 Comment",
        "ratings.comment_prompt": "💬 Write a short comment for this player (up to 500 characters):",
        "ratings.done": "✅ Done",
        "ratings.save": "💾 Save",
        "ratings.nothing_to_submit": "You have not rated anyone yet. Rate or save at least one player before submitting.",
        "ratings.submit_all": "📤 Submit All",
        "ratings.submitted": "{count} ratings submitted.",
        "ratings.partial_failure": "⚠️ {failed} ratings could not be submitted: {reason}\nThey are still in the list so you can retry.",
        "ratings.partial_failure_short": "{failed} ratings could not be submitted.",

        # Profile
        "profile.email": "📧 Email",
        "profile.phone": "📞 Phone",
        "profile.role": "🎭 Role",
        "profile.not_set": "Not set",
        "profile.elo": "📈 ELO",
        "profile.trust": "🤝 Trust score",
        "profile.matches": "⚽ Matches played",
        "profile.streaks": "🔥 Streak: {current} (longest {longest})",
        "profile.has_picture": "🖼️ Profile picture uploaded",
        "profile.ratings_title": "⭐ *Ratings Received*",
        "profile.no_ratings": "Nobody has rated you yet.",
        "profile.ratings_overall": "Overall: {overall} ({count} ratings)",
        "profile.edit_first_name": "✏️ First Name",
        "profile.edit_last_name": "✏️ Last Name",
        "profile.edit_phone": "📞 Phone",
        "profile.change_password": "🔒 Change Password",
        "profile.upload_picture": "🖼️ Upload Picture",
        "profile.enter_first_name": "✏️ Enter your new first name:",
        "profile.enter_last_name": "✏️ Enter your new last name:",
        "profile.enter_phone": "📞 Enter your phone number (05XXXXXXXXX):",
        "profile.updated": "Profile updated.",
        "profile.enter_current_password": "🔒 Enter your current password:",
        "profile.enter_new_password": "🔒 Enter a new password (at least 6 characters):",
        "profile.confirm_new_password": "🔒 Enter the new password again:",
        "profile.password_changed": "Your password was changed.",
        "profile.send_picture": "🖼️ Send an image to use as your profile picture (up to 5 MB).",
        "profile.picture_uploaded": "Profile picture uploaded.",

        # Admin
        "admin.title": "👮 *Admin Panel*",
        "admin.shutting_down": "🛑 Shutting down the bot...",
        "admin.stat_users": "👤 Users: {total} ({active} active)",
        "admin.stat_venues": "🏟️ Venues: {total}",
        "admin.stat_reservations": "📅 Reservations: {total} ({pending} pending)",
        "admin.stat_revenue": "💰 Revenue: {amount}",
        "admin.statistics": "📊 Statistics",
        "admin.statistics_title": "📊 *Statistics*",
        "admin.user_types": "User types:",
        "admin.popular_venues": "Popular venues:",
        "admin.monthly_revenue": "Monthly revenue:",
        "admin.daily_reservations": "Daily reservations:",
        "admin.no_statistics": "No statistics yet.",
        "admin.users": "👤 Users",
        "admin.reservations": "📅 Reservations",
        "admin.teams": "🛡️ Teams",
        "admin.users_title": "👤 *Users*",
        "admin.reservations_title": "📅 *All Reservations*",
        "admin.teams_title": "🛡️ *Teams*",
        "admin.filter_all": "All",
        "admin.filter_search": "🔎 Search: {value}",
        "admin.filter_type": "🎭 Type: {value}",
        "admin.filter_status": "📌 Status: {value}",
        "admin.list_empty": "No records found.",
        "admin.list_total": "{total} records in total",
        "admin.search_button": "🔎 Search",
        "admin.search_prompt": "🔎 Type a search term:",
        "admin.account_status": "📌 Account",
        "admin.active": "Active",
        "admin.inactive": "Inactive",
        "admin.activate": "✅ Activate",
        "admin.deactivate": "⛔ Deactivate",
        "admin.delete": "🗑️ Delete",
        "admin.delete_locked": "🔒 Cannot delete",
        "admin.customer": "👤 Customer",
        "admin.captain": "🧢 Captain",
        "admin.user_activated": "User activated.",
        "admin.user_deactivated": "User deactivated.",
        "admin.user_type_changed": "User type changed to {role}.",
        "admin.delete_user_confirm": "Permanently delete {name}?",
        "admin.user_deleted": "User deleted.",
        "admin.status_updated": "Status updated to {status}.",
        "admin.delete_team_confirm": "Permanently delete the team {name}?",
        "admin.team_deleted": "Team deleted.",

        # Toasts
        "toast.dismiss": "✖️ Dismiss",

        # Validation
        "validation.try_again": "Please try again.",
        "validation.email_missing_at": "The email address must contain an @ sign.",
        "validation.email_domain": "The email domain is not valid.",
        "validation.email_invalid": "Enter a valid email address.",
        "validation.phone_too_short": "The phone number is too short.",
        "validation.phone_too_long": "The phone number is too long.",
        "validation.name_empty": "The name cannot be empty.",
        "validation.name_too_short": "The name must be at least 2 characters.",
        "validation.name_too_long": "The name can be at most 50 characters.",
        "validation.name_invalid": "The name may only contain letters.",
        "validation.password_too_short": "The password must be at least 6 characters.",
        "validation.password_mismatch": "The passwords do not match.",
        "validation.search_too_long": "The search term can be at most 100 characters.",
        "validation.upload_not_image": "Only image files can be uploaded.",
        "validation.upload_too_large": "The file exceeds the 5 MB limit.",
        "validation.invalid_choice": "Invalid choice.",
        "validation.admin_delete_blocked": "Admin accounts cannot be deleted.",

        # Team screen
        "teams.record": "🏆 {matches} matches, {wins} wins ({rate}%)",
        "teams.has_logo": "🖼️ Team logo uploaded",
        "teams.create_button": "➕ Create Team",
        "teams.enter_name": "🛡️ Type your team's name:",
        "teams.created": "Team created.",
        "teams.edit_description": "📝 Description",
        "teams.enter_description": "📝 Type the team description:",
        "teams.updated": "Team details updated.",
        "teams.invite_button": "➕ Invite Player",
        "teams.enter_username": "🔎 Type the username of the player to invite:",
        "teams.candidates_title": "🔎 *Players matching \"{term}\"*",
        "teams.no_candidates": "No player found with that username.",
        "teams.has_team": "(has a team)",
        "teams.invite_player": "➕ Invite {name}",
        "teams.invited": "{name} was invited to the team.",
        "teams.search_again": "🔎 Search Again",
        "teams.upload_logo": "🖼️ Logo",
        "teams.send_logo": "🖼️ Send a photo to use as the team logo (max 5 MB).",
        "teams.logo_uploaded": "Team logo updated.",
        "teams.notifications": "🔔 Notifications",
        "teams.notifications_title": "🔔 *Team Notifications*",
        "teams.no_notifications": "No notifications.",
        "teams.mark_all_read": "✔️ Mark all as read",

        # Opponent search
        "social.opponents": "⚔️ Find Opponents",
        "opponents.title": "⚔️ *Teams looking for opponents*",
        "opponents.empty": "No team is looking for an opponent right now.",
        "opponents.count": "{count} listings",
        "opponents.my_listings": "📋 My Listings",
        "opponents.create_button": "➕ New Listing",
        "opponents.my_title": "📋 *My team's listings*",
        "opponents.my_empty": "Your team has no open listings.",
        "opponents.dates": "📅 Date range",
        "opponents.match_type": "🎯 Match type",
        "opponents.type_friendly": "Friendly",
        "opponents.type_competitive": "Competitive",
        "opponents.duration": "⏱️ Duration",
        "opponents.minutes": "{minutes} min",
        "opponents.enter_title": "📝 Type a title for the listing:",
        "opponents.enter_date_start": "📅 Earliest date (YYYY-MM-DD):",
        "opponents.enter_date_end": "📅 Latest date (YYYY-MM-DD):",
        "opponents.choose_match_type": "🎯 Choose the match type:",
        "opponents.created": "Listing published.",
        "opponents.propose_button": "🤝 Propose Match",
        "opponents.enter_proposal_date": "📅 Match date (between {start} and {end}, YYYY-MM-DD):",
        "opponents.enter_proposal_time": "🕒 Kick-off time (HH:MM):",
        "opponents.proposal_sent": "Your match proposal was sent.",

        # Players wanted
        "player_search.filter_position": "🎽 Position: {value}",
        "player_search.position_button": "🎽 Position",
        "player_search.choose_city": "🏙️ Choose a city:",
        "player_search.choose_district": "📍 Choose a district:",
        "player_search.choose_playerPosition": "🎽 Choose a position:",
        "player_search.positions": "Positions",
        "player_search.leave_button": "🚪 Leave: {when}",
        "player_search.left": "You left the listing.",
        "player_search.mine_button": "📋 My Listings",
        "player_search.mine_title": "📋 *Matches I am finding players for*",
        "player_search.mine_empty": "You have no listings.",
        "player_search.cancel_button": "🗑️ Close: {when}",
        "player_search.cancelled": "Listing closed.",
        "player_search.find_players": "🔍 Find Players",
        "player_search.requests_button": "🙋 Join Requests",
        "player_search.enter_players_needed": "👥 How many players do you need? (1-22)",
        "player_search.enter_description": "📝 Add a short description (level, positions, notes):",
        "player_search.created": "Your players-wanted listing is live.",
        "player_search.requests_title": "🙋 *Join Requests*",
        "player_search.no_requests": "No join requests yet.",
        "player_search.request_accepted": "Request accepted.",
        "player_search.request_rejected": "Request rejected.",

        # Reservation periods
        "reservations.period_all": "All",
        "reservations.period_upcoming": "Upcoming",
        "reservations.period_past": "Past",

        # Admin venues
        "admin.venues": "🏟️ Venues",
        "admin.venues_title": "🏟️ *Venue Management*",
        "admin.venue_create": "➕ Add Venue",
        "admin.venue_enter_name": "🏟️ Type the venue name:",
        "admin.venue_enter_location": "📍 Type the venue address:",
        "admin.venue_enter_price": "💰 Type the hourly price (₺):",
        "admin.venue_created": "Venue added.",
        "admin.venue_hours": "🕒 Opening hours",
        "admin.venue_price": "💰 Price",
        "admin.venue_updated": "Venue updated.",
        "admin.venue_activated": "Venue published.",
        "admin.venue_deactivated": "Venue unpublished.",
        "admin.delete_venue_confirm": "Permanently delete the venue {name}?",
        "admin.venue_deleted": "Venue deleted.",

        "validation.team_name_required": "A team name is required.",
        "validation.search_empty": "Type a username.",
        "validation.listing_required": "A title and a date range are required.",
        "validation.date_invalid": "Write the date as YYYY-MM-DD.",
        "validation.date_range": "The end date cannot be before the start date.",
        "validation.time_invalid": "Write the time as HH:MM.",
        "validation.players_needed": "The number of players must be between 1 and 22.",
        "validation.description_required": "A description is required.",
        "validation.venue_required": "A venue name and address are required.",
        "validation.price_invalid": "Type a valid price above zero.",

        # Errors
        "error.generic": "Something went wrong.",
        "error.network": "📡 Cannot reach the server. Check your connection and try again.",
        "error.unexpected": "❌ An unexpected error occurred. Please try again.",
        "error.access_denied": "⛔ You do not have access to this section.",
    },
}


def get_all_keys() -> set:
    """Get all translation keys across all languages for validation."""
    all_keys = set()
    for lang_strings in STRINGS.values():
        all_keys.update(lang_strings.keys())
    return all_keys


def validate_translations() -> None:
    """Validate that all languages have the same keys."""
    all_keys = get_all_keys()
    for lang, lang_strings in STRINGS.items():
        missing = all_keys - set(lang_strings.keys())
        if missing:
            raise ValueError(f"Language '{lang}' is missing keys: {missing}")


# Validate on import
validate_translations()
