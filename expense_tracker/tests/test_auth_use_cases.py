from __future__ import annotations

import pytest

from expense_tracker.application.use_cases.users.change_password import ChangePasswordUseCase
from expense_tracker.application.use_cases.users.check_availability import (
    CheckEmailAvailabilityUseCase,
    CheckUsernameAvailabilityUseCase,
)
from expense_tracker.application.use_cases.users.delete_account import DeleteAccountUseCase
from expense_tracker.application.use_cases.users.login_user import LoginUserUseCase
from expense_tracker.application.use_cases.users.register_user import (
    RegisterUserInput,
    RegisterUserUseCase,
)
from expense_tracker.application.use_cases.users.update_profile import (
    UpdateProfileInput,
    UpdateProfileUseCase,
)
from expense_tracker.application.use_cases.users.validate_token import ValidateTokenUseCase
from expense_tracker.domain.users.exceptions import (
    DuplicateEmailError,
    DuplicateUsernameError,
    IncorrectPasswordError,
    InvalidCredentialsError,
    InvalidTokenError,
    UserNotFoundError,
)


@pytest.fixture()
def register(users, tokens, hasher) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, tokens=tokens, password_hasher=hasher)


@pytest.fixture()
def login(users, tokens, hasher) -> LoginUserUseCase:
    return LoginUserUseCase(users=users, tokens=tokens, password_hasher=hasher)


def _alice(**overrides) -> RegisterUserInput:
    fields = {"username": "alice", "email": "alice@example.com", "password": "secret123"}
    fields.update(overrides)
    return RegisterUserInput(**fields)


def test_register_user_success(register, users, tokens) -> None:
    user, token = register.execute(_alice(first_name="Alice"))

    assert user.id == 1
    assert user.first_name == "Alice"
    assert user.password_hash == "hashed:secret123"
    assert tokens.validate(token.token) == "alice"
    assert users.find_by_username("alice") is not None


def test_register_duplicate_username_raises(register) -> None:
    register.execute(_alice())

    with pytest.raises(DuplicateUsernameError):
        register.execute(_alice(email="other@example.com"))


def test_register_duplicate_email_raises(register) -> None:
    register.execute(_alice())

    with pytest.raises(DuplicateEmailError):
        register.execute(_alice(username="alice2"))


@pytest.mark.parametrize("login_name", ["alice", "alice@example.com"])
def test_login_by_username_or_email(register, login, login_name: str) -> None:
    register.execute(_alice())

    user, token = login.execute(login_name, "secret123")

    assert user.username == "alice"
    assert token.username == "alice"


def test_login_failures_are_indistinguishable(register, login) -> None:
    register.execute(_alice())

    with pytest.raises(InvalidCredentialsError) as wrong_password:
        login.execute("alice", "wrong")
    with pytest.raises(InvalidCredentialsError) as unknown_user:
        login.execute("nobody", "secret123")

    assert wrong_password.value.to_dict() == unknown_user.value.to_dict()


class RecordingHasher:
    def __init__(self) -> None:
        self.verified: list[tuple[str, str]] = []

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        self.verified.append((password, hashed))
        return hashed == f"hashed:{password}"


def test_login_with_unknown_user_still_checks_a_hash(users, tokens) -> None:
    recorder = RecordingHasher()
    login = LoginUserUseCase(users=users, tokens=tokens, password_hasher=recorder)

    for _ in range(2):
        with pytest.raises(InvalidCredentialsError):
            login.execute("nobody", "secret123")

    assert len(recorder.verified) == 2
    assert {hashed for _, hashed in recorder.verified} == {"hashed:unknown-user-placeholder"}


def test_validate_token_returns_user(register, users, tokens) -> None:
    _, token = register.execute(_alice())
    validate = ValidateTokenUseCase(users=users, tokens=tokens)

    assert validate.execute(token.token).email == "alice@example.com"


def test_validate_token_of_deleted_user_fails(register, users, tokens) -> None:
    user, token = register.execute(_alice())
    DeleteAccountUseCase(users=users).execute(user.id)

    with pytest.raises(InvalidTokenError):
        ValidateTokenUseCase(users=users, tokens=tokens).execute(token.token)


def test_availability_checks(register, users) -> None:
    register.execute(_alice())

    assert CheckUsernameAvailabilityUseCase(users=users).execute("alice") is False
    assert CheckUsernameAvailabilityUseCase(users=users).execute("bob") is True
    assert CheckEmailAvailabilityUseCase(users=users).execute("alice@example.com") is False


def test_update_profile_patches_only_given_fields(register, users) -> None:
    user, _ = register.execute(_alice(first_name="Alice", last_name="Smith"))

    updated = UpdateProfileUseCase(users=users).execute(
        user.id, UpdateProfileInput(last_name="Jones")
    )

    assert updated.first_name == "Alice"
    assert updated.last_name == "Jones"
    assert updated.email == "alice@example.com"


def test_update_profile_rejects_taken_email(register, users) -> None:
    user, _ = register.execute(_alice())
    register.execute(_alice(username="bob", email="bob@example.com"))

    with pytest.raises(DuplicateEmailError):
        UpdateProfileUseCase(users=users).execute(
            user.id, UpdateProfileInput(email="bob@example.com")
        )


def test_change_password(register, login, users, hasher) -> None:
    user, _ = register.execute(_alice())
    change = ChangePasswordUseCase(users=users, password_hasher=hasher)

    with pytest.raises(IncorrectPasswordError):
        change.execute(user.id, "wrong", "newsecret")

    change.execute(user.id, "secret123", "newsecret")

    assert login.execute("alice", "newsecret")[0].id == user.id
    with pytest.raises(InvalidCredentialsError):
        login.execute("alice", "secret123")


def test_delete_unknown_account_raises(users) -> None:
    with pytest.raises(UserNotFoundError):
        DeleteAccountUseCase(users=users).execute(42)
