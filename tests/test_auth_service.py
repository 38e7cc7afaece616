import pytest

from app.api.auth.schemas import UserCreate, UserLogin
from app.api.auth.services import AuthService
from app.core.exceptions import ApiError, Conflict, IdentityProviderError, InternalError
from app.core.identity import LocalIdentityProvider
from app.db.models.user import User


class FakeIdentityProvider:
    def __init__(self, error_code=None):
        self.error_code = error_code
        self.created = []

    def create_user(self, email, password, display_name=None):
        if self.error_code:
            raise IdentityProviderError(self.error_code)
        self.created.append(email)
        return f"uid-{len(self.created)}"

    def get_user(self, uid):
        if self.error_code:
            raise IdentityProviderError(self.error_code)
        return object()


SIGNUP = UserCreate(full_name="Alice Example", email="a@x.com", password="secret1")


def test_signup_uses_provider_issued_id(db):
    provider = FakeIdentityProvider()
    result = AuthService(db, provider).signup(SIGNUP)
    assert result["user"].id == "uid-1"
    assert result["token"]
    assert db.get(User, "uid-1").hashed_password != "secret1"


@pytest.mark.parametrize(
    "code, status_code",
    [
        ("auth/email-already-exists", 409),
        ("auth/weak-password", 400),
        ("auth/internal-error", 500),
    ],
)
def test_signup_translates_provider_errors(db, code, status_code):
    with pytest.raises(ApiError) as exc:
        AuthService(db, FakeIdentityProvider(code)).signup(SIGNUP)
    assert exc.value.status_code == status_code
    assert db.query(User).count() == 0


def test_signup_duplicate_email_is_checked_before_provider(db):
    AuthService(db, LocalIdentityProvider(db)).signup(SIGNUP)
    provider = FakeIdentityProvider()
    with pytest.raises(Conflict):
        AuthService(db, provider).signup(SIGNUP)
    assert provider.created == []


def test_signin_provider_failure_is_internal_error(db):
    AuthService(db, LocalIdentityProvider(db)).signup(SIGNUP)
    service = AuthService(db, FakeIdentityProvider("auth/user-not-found"))
    with pytest.raises(InternalError) as exc:
        service.signin(UserLogin(email="a@x.com", password="secret1"))
    assert exc.value.message == "User authentication error"
