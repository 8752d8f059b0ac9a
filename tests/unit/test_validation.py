from botapp.validation import ValidationHelpers


def test_email_validation_normalises_and_explains():
    assert ValidationHelpers.validate_email("  Ali@Example.COM ") == (True, "ali@example.com")
    assert ValidationHelpers.validate_email("ali.example.com") == (False, "validation.email_missing_at")
    assert ValidationHelpers.validate_email("ali@example") == (False, "validation.email_domain")
    assert ValidationHelpers.validate_email("ali@@example.com") == (False, "validation.email_invalid")


def test_phone_validation_accepts_turkish_formats():
    assert ValidationHelpers.validate_phone_number("0532 123 45 67") == (True, "05321234567")
    assert ValidationHelpers.validate_phone_number("5321234567") == (True, "05321234567")
    assert ValidationHelpers.validate_phone_number("+90 532 123 45 67") == (True, "05321234567")
    assert ValidationHelpers.validate_phone_number("0532") == (False, "validation.phone_too_short")
    assert ValidationHelpers.validate_phone_number("053212345678") == (False, "validation.phone_too_long")


def test_name_validation():
    assert ValidationHelpers.validate_name("  Ayşe   Nur ") == (True, "Ayşe Nur")
    assert ValidationHelpers.validate_name("") == (False, "validation.name_empty")
    assert ValidationHelpers.validate_name("A") == (False, "validation.name_too_short")
    assert ValidationHelpers.validate_name("x" * 51) == (False, "validation.name_too_long")
    assert ValidationHelpers.validate_name("R2D2") == (False, "validation.name_invalid")


def test_password_and_search_validation():
    assert ValidationHelpers.validate_password("12345") == (False, "validation.password_too_short")
    assert ValidationHelpers.validate_password("123456") == (True, "123456")
    assert ValidationHelpers.validate_search_term("  halı   saha ") == (True, "halı saha")
    assert ValidationHelpers.validate_search_term("x" * 101) == (False, "validation.search_too_long")


def test_date_time_and_player_count_validation():
    assert ValidationHelpers.validate_date(" 07.06.2025 ") == (True, "2025-06-07")
    assert ValidationHelpers.validate_date("2025-06-07") == (True, "2025-06-07")
    assert ValidationHelpers.validate_date("2025-02-30") == (False, "validation.date_invalid")
    assert ValidationHelpers.validate_time("20.30") == (True, "20:30")
    assert ValidationHelpers.validate_time("9:05") == (True, "09:05")
    assert ValidationHelpers.validate_time("24:00") == (False, "validation.time_invalid")
    assert ValidationHelpers.validate_players_needed("22") == (True, "22")
    assert ValidationHelpers.validate_players_needed("0") == (False, "validation.players_needed")
    assert ValidationHelpers.validate_players_needed("23") == (False, "validation.players_needed")
    assert ValidationHelpers.validate_players_needed("üç") == (False, "validation.players_needed")
