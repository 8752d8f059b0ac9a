from botapp.bootstrap import DependencyContainer
from botapp.config import load_bot_config
from infrastructure.settings import load_settings
from users.models import UserRole


def _container(tmp_path):
    settings = load_settings({"SESSIONS_FILE": str(tmp_path / "sessions.json"), "TOAST_DURATION_SECONDS": "3.5"})
    return DependencyContainer(load_bot_config(settings))


def test_build_dependencies_shares_one_client_and_store(tmp_path):
    async def on_expired(user_id, message=None):
        return None

    deps = _container(tmp_path).build_dependencies(on_expired)

    assert deps.guard.store is deps.session_store
    assert deps.invitation_poller.session_store is deps.session_store
    assert deps.callback_handler.deps.venue_service.client is deps.api_client
    assert deps.api_client._on_unauthorized is on_expired
    assert deps.toast.duration == 3.5


def test_callback_routes_carry_roles(tmp_path):
    router = _container(tmp_path).build_dependencies().callback_handler.router

    assert router.resolve("auth_login").role is None
    assert router.resolve("menu_venues").role is UserRole.PLAYER
    assert router.resolve("admin_page_2").role is UserRole.ADMIN
    assert router.resolve("lang_en").role is None


def test_overrides_replace_factories(tmp_path):
    sentinel = object()
    container = DependencyContainer(load_bot_config(load_settings({})), overrides={"toast": sentinel})

    assert container.toast is sentinel
