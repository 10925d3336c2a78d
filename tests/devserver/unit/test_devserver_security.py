from guildcal.devserver.security import generate_token, verify_password


def test_verify_password_accepts_exact_match_only() -> None:
    assert verify_password("guildpass", "guildpass") is True
    assert verify_password("GuildPass", "guildpass") is False
    assert verify_password("", "guildpass") is False


def test_generate_token_returns_non_empty_random_value() -> None:
    first = generate_token()
    second = generate_token()

    assert first
    assert second
    assert first != second
