"""
Tests for the command registry module (promptlog/commands.py).

The registry is hand-maintained data, so these are mostly schema tests: every
entry is well formed, triggers are unique and start with "/", and the help
text lists everything.
"""

from promptlog.commands import COMMANDS, find_command, get_help_text


class TestCommandRegistry:
    """Tests for the COMMANDS registry data structure."""

    def test_commands_is_non_empty_list(self):
        assert isinstance(COMMANDS, list)
        assert len(COMMANDS) > 0

    def test_all_commands_have_required_fields(self):
        for cmd in COMMANDS:
            assert "triggers" in cmd, f"Command missing 'triggers' field: {cmd}"
            assert "description" in cmd, f"Command missing 'description' field: {cmd}"
            assert "usage" in cmd, f"Command missing 'usage' field: {cmd}"

    def test_all_command_fields_are_correct_types(self):
        for cmd in COMMANDS:
            assert isinstance(cmd["triggers"], list)
            assert all(isinstance(t, str) for t in cmd["triggers"])
            assert isinstance(cmd["description"], str) and cmd["description"]
            assert isinstance(cmd["usage"], str)

    def test_triggers_start_with_slash(self):
        for cmd in COMMANDS:
            for trigger in cmd["triggers"]:
                assert trigger.startswith("/"), f"Trigger must start with '/': {trigger}"

    def test_no_duplicate_triggers(self):
        triggers = [t for cmd in COMMANDS for t in cmd["triggers"]]
        assert len(triggers) == len(set(triggers))

    def test_expected_commands_present(self):
        triggers = {t for cmd in COMMANDS for t in cmd["triggers"]}
        expected = {"/help", "/quit", "/exit", "/prompt", "/warn", "/error", "/symbol", "/file", "/clear"}
        assert expected <= triggers


class TestFindCommand:
    def test_alias_resolves_to_same_entry(self):
        assert find_command("/exit") is find_command("/quit")

    def test_unknown_trigger(self):
        assert find_command("/nope") is None


class TestGetHelpText:
    def test_lists_every_trigger(self):
        text = get_help_text()
        for cmd in COMMANDS:
            for trigger in cmd["triggers"]:
                assert trigger in text

    def test_lists_descriptions_and_usage(self):
        text = get_help_text()
        for cmd in COMMANDS:
            assert cmd["description"] in text
            if cmd["usage"]:
                assert cmd["usage"] in text

    def test_uses_rich_markup(self):
        text = get_help_text()
        assert "[bold cyan]" in text
        assert "[green]" in text
