import pytest

from tinylibc.errors import Errno, LibcError


@pytest.mark.parametrize(
    "number, code",
    [
        (1, Errno.EPERM),
        (22, Errno.EINVAL),
        (58, Errno.EDEADLOCK),
        (100, Errno.ESCHED),
    ],
)
def test_documented_numbers(number, code):
    err = LibcError(number)
    assert err.code is code
    assert int(err.code) == number


def test_every_code_has_description():
    for code in Errno:
        err = LibcError(code)
        assert err.message == code.description
        assert isinstance(err.message, str)
        assert err.message


def test_error_from_plain_int_is_normalised():
    err = LibcError(12)
    assert err.code is Errno.ENOMEM
    assert err.message == Errno.ENOMEM.description
    assert "ENOMEM" in str(err)


def test_error_keeps_custom_message():
    err = LibcError(Errno.EFAULT, "bad task list")
    assert err.code is Errno.EFAULT
    assert err.message == "bad task list"
    assert "bad task list" in str(err)


def test_error_is_raisable_and_catchable():
    err = LibcError(Errno.EPERM, "not the owner")
    with pytest.raises(LibcError) as info:
        raise err
    assert info.value is err
    assert info.value.code is Errno.EPERM
    assert info.value.message == "not the owner"


def test_unknown_code_rejected():
    with pytest.raises(ValueError):
        LibcError(9999)