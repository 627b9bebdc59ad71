import pytest

from user_records.schemas.user import is_email_valid


@pytest.mark.parametrize(
    "email",
    ["a@b.co", "alan.shearer@ecs.co.uk", "first+tag@sub.example.org", "Alan@ECS.co.uk"],
)
def test_valid_addresses(email):
    assert is_email_valid(email)


@pytest.mark.parametrize(
    "email",
    [
        "",
        "bad",
        "invalid-email",
        "a@b",
        "@b.co",
        "a@.co",
        "a@b.",
        "a b@c.co",
        "a@b .co",
        "a@@b.co",
        "a@" + "b" * 250 + ".co",
        "a@b.co\n",
        " a@b.co",
        "a@b.co\t",
        "Alan <a@b.co>",
    ],
)
def test_invalid_addresses(email):
    assert not is_email_valid(email)
