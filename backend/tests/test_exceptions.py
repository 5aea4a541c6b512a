from shopvisit.core.exceptions import (
    ERROR_STATUS_CODES,
    AuthError,
    ConflictError,
    ExpiredError,
    NotFoundError,
    ServerError,
    ShopVisitError,
    ValidationError,
    status_code_for,
)


def test_status_mapping():
    assert status_code_for(ValidationError()) == 400
    assert status_code_for(AuthError()) == 401
    assert status_code_for(NotFoundError()) == 404
    assert status_code_for(ConflictError()) == 409
    assert status_code_for(ExpiredError()) == 410
    assert status_code_for(ServerError()) == 500
    assert status_code_for(ShopVisitError()) == 500


def test_subclass_inherits_status():
    class UnknownShopError(NotFoundError):
        pass

    assert status_code_for(UnknownShopError("Shop not found")) == 404


def test_default_and_custom_messages():
    assert ServerError().message == "Server error"
    assert ExpiredError("OTP expired").message == "OTP expired"
    assert set(ERROR_STATUS_CODES) == {ValidationError, AuthError, NotFoundError, ConflictError, ExpiredError, ServerError}
