# kwaak

The core of a terminal front end for autonomous coding agents, written as
plain Python. The package has:

- the chat model of the front end: chats, their loading states, scrolling and
  switching between them
- slash commands that users type, such as `/diff pull` or `/next_chat`, and the
  UI events they turn into
- formatting of chat messages and tool calls for display
- helpers for project configuration, such as working out the owner and
  repository from a git remote
- a patch evaluation that checks whether an agent made exactly the expected
  edits to a file

The package uses only the standard library.

## Layout

| Module | Purpose |
| --- | --- |
| `kwaak.config` | `CommandConfiguration` and default values such as `default_project_name`, `default_cache_dir` and `extract_owner_and_repo` |
| `kwaak.evaluations.output` | `EvalOutput` and `EvalMetrics`, which write evaluation artefacts per iteration |
| `kwaak.evaluations.logging_responder` | `LoggingResponder`, which collects agent and backend messages into a readable log |
| `kwaak.evaluations.patch` | the patch evaluation prompt, `compare_diff` and `compare_changes` |
| `kwaak.frontend.message_formatting` | `ChatRole`, `ChatMessage`, `ToolCall` and their display formatting |
| `kwaak.frontend.events` | `UserInputCommand`, `DiffVariant`, `BackendCommand` and `UIEvent` |
| `kwaak.frontend.app` | `App`, `Chat`, `ChatState` and `AppMode` |
| `kwaak.frontend.actions` | scrolling, deleting chats and finding the last message to copy |

## Examples

Find the owner and repository in a git remote URL:

```python
from kwaak.config import extract_owner_and_repo

extract_owner_and_repo("https://github.com/owner/repo.git")
# ('owner', 'repo')
```

Parse a slash command and see what it turns into:

```python
from kwaak.frontend.events import UserInputCommand

command = UserInputCommand.parse_from_input("/diff pull")
command.to_ui_event()    # the event that pulls the agent's changes
command.to_command()     # None: this command does not go to the backend
```

`/diff` with no subcommand means `/diff show`. An unknown command raises an
error.

Work with chats in the app model:

```python
from kwaak.frontend.app import App, AppMode, Chat

app = App()
app.add_chat(Chat())     # becomes "Chat #2" and the current chat
app.next_chat()          # goes back round to the first chat
app.change_mode(AppMode.LOGS)
```

Format a tool call for display:

```python
from kwaak.frontend.message_formatting import ToolCall, format_tool_call

format_tool_call(ToolCall(name="shell_command", id="tool_id", args='{"cmd":"ls"}'))
# 'running shell command `ls`'
```

## Patch evaluation

The patch evaluation asks an agent to make two small edits to a long file
and then reads `git diff` to check that the expected lines were added and
removed. `compare_diff` does the check on diff text alone, and
`compare_changes` runs `git`, writes the diff and any failure report through
an `EvalOutput`, and then restores the file.