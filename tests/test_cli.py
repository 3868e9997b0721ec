from satire_api.api.cli import apply_command, format_result


def test_lang_command_resolves_tag():
    settings = {"lang": "ja"}
    feedback = apply_command("/lang zh_TW", settings)
    assert settings["lang"] == "zh-rTW"
    assert "繁體中文" in feedback


def test_length_and_style_commands_validate():
    settings = {}
    assert apply_command("/length medium", settings).startswith("Usage")
    assert "length" not in settings
    apply_command("/length short", settings)
    apply_command("/style PRINTER", settings)
    assert settings == {"length": "short", "style": "printer"}


def test_unknown_command():
    assert apply_command("/nope", {}).startswith("Unknown command")


def test_format_result():
    assert format_result(400, {"error": "word is required"}) == "[400] word is required"
    text = format_result(200, {"satire": "s", "type": "t", "error": "upstream timeout after 18s"})
    assert text.splitlines() == ["s", "(t)", "[fallback: upstream timeout after 18s]"]
