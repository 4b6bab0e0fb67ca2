import pytest
from unittest.mock import Mock

from fxform.core.logging import command_ctx
from fxform.viewmodels.commands import Command, CommandSet


class TestCommand:
    """Tests for guarded commands and availability notifications."""

    def test_unguarded_command_is_always_available(self):
        cmd = Command("swap", Mock())

        assert cmd.can_execute() is True

    def test_guard_is_evaluated_on_every_query(self):
        flags = iter([False, True])
        cmd = Command("convert", Mock(), guard=lambda: next(flags))

        assert cmd.can_execute() is False
        assert cmd.can_execute() is True

    def test_execute_runs_action_inside_command_context(self):
        seen = []
        cmd = Command("clear", lambda: seen.append(command_ctx.get()))

        cmd.execute()

        assert seen == ["clear"]
        assert command_ctx.get() is None

    def test_execute_ignores_guard(self):
        action = Mock()
        cmd = Command("convert", action, guard=lambda: False)

        cmd.execute()

        action.assert_called_once_with()

    def test_can_execute_changed_listeners(self):
        listener = Mock()
        cmd = Command("convert", Mock())
        remove = cmd.on_can_execute_changed(listener)

        cmd.raise_can_execute_changed()
        remove()
        cmd.raise_can_execute_changed()

        listener.assert_called_once_with(cmd)

    def test_action_errors_propagate(self):
        cmd = Command("convert", Mock(side_effect=RuntimeError("bug")))

        with pytest.raises(RuntimeError):
            cmd.execute()


class TestCommandSet:
    """Tests for named command lookup."""

    @pytest.fixture
    def commands(self):
        return CommandSet(
            convert=Command("convert", Mock()),
            swap=Command("swap", Mock()),
            clear=Command("clear", Mock()),
        )

    def test_lookup_by_name(self, commands):
        assert commands["swap"] is commands.swap
        assert [c.name for c in commands] == ["convert", "swap", "clear"]

    def test_unknown_name(self, commands):
        with pytest.raises(KeyError, match="unknown command"):
            commands["undo"]
