import json

import pytest

from kwaak.frontend.message_formatting import (
    ASSISTANT_STYLE,
    COMMAND_STYLE,
    SYSTEM_STYLE,
    USER_STYLE,
    ChatMessage,
    ChatRole,
    ToolCall,
    format_tool_call,
    get_style_and_prefix,
    get_value,
    pretty_format_tool,
)


def test_get_style_and_prefix():
    assert get_style_and_prefix(ChatRole.USER) == ("▶ ", USER_STYLE)
    assert get_style_and_prefix(ChatRole.ASSISTANT) == ("✦ ", ASSISTANT_STYLE)
    assert get_style_and_prefix(ChatRole.SYSTEM) == ("ℹ ", SYSTEM_STYLE)
    assert get_style_and_prefix(ChatRole.COMMAND) == ("» ", COMMAND_STYLE)


def test_every_role_has_a_prefix():
    for role in ChatRole:
        prefix, _style = get_style_and_prefix(role)
        assert prefix.endswith(" ")


def test_format_tool_call():
    tool_call = ToolCall(id="tool_id", name="shell_command", args='{"cmd":"ls"}')
    assert format_tool_call(tool_call) == "running shell command `ls`"


def test_get_value():
    assert get_value({"key": "value"}, "key") == "value"


def test_get_value_missing_or_not_string():
    assert get_value(None, "key") is None
    assert get_value({"key": 3}, "key") is None
    assert get_value({"other": "x"}, "key") is None


def test_pretty_format_without_arguments():
    tool_call = ToolCall(id="1", name="create_or_update_pull_request")
    assert pretty_format_tool(tool_call) == "creating a pull request"


def test_pretty_format_known_tool_missing_key_is_none():
    tool_call = ToolCall(id="1", name="read_file", args='{"path": "x"}')
    assert pretty_format_tool(tool_call) is None


def test_pretty_format_unknown_tool_is_none():
    assert pretty_format_tool(ToolCall(id="1", name="mystery", args="{}")) is None


def test_unknown_tool_single_short_argument():
    tool_call = ToolCall(id="1", name="mystery", args=json.dumps({"q": "abc"}))
    assert format_tool_call(tool_call) == "calling tool `mystery` with `abc`"


def test_unknown_tool_single_long_argument_is_truncated():
    value = "a" * 30
    tool_call = ToolCall(id="1", name="mystery", args=json.dumps({"q": value}))
    assert format_tool_call(tool_call) == f"calling tool `mystery` with `{value[:20]} ...`"


def test_unknown_tool_many_arguments_are_truncated():
    args = json.dumps({"first": "one", "second": "two"})
    tool_call = ToolCall(id="1", name="mystery", args=args)
    assert format_tool_call(tool_call) == f"calling tool `mystery` with `{args[:20]} ...`"


@pytest.mark.parametrize("args", [None, "{}", "not json", "[1, 2]"])
def test_unknown_tool_without_usable_arguments(args):
    tool_call = ToolCall(id="1", name="mystery", args=args)
    assert format_tool_call(tool_call) == "calling tool `mystery`"


def test_message_constructors_set_roles():
    assert ChatMessage.new_user("hi").role is ChatRole.USER
    assert ChatMessage.new_system("hi").role.is_system
    assert ChatMessage.new_command("hi").role is ChatRole.COMMAND
    message = ChatMessage.new_assistant("hello")
    assert message.role.is_assistant
    assert message.content == "hello"