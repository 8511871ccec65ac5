"""
SOLE RESPONSIBILITY: Provides pure functions for transforming decoded stream messages
(and their ContentBlocks) into short, human-readable lines.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from .decoder import decode
from .error_codes import DecodeError
from .models import ContentBlock, StreamMessage, TextBlock, ToolUseBlock

MAX_LINE_LENGTH = 80
ELLIPSIS = "..."
PLACEHOLDER = "?"

DONE_MARKER = "✅"
UNKNOWN_TOOL_MARKER = "🔧"

# str.isspace() also counts the ASCII information separators, which are visible content here
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def is_blank(text: str) -> bool:
    """True when `text` holds nothing but Unicode White_Space characters."""
    return all(ch.isspace() and ch not in _NOT_WHITESPACE for ch in text)


def truncate(s: str, max_len: int) -> str:
    """
    Shorten `s` to at most `max_len` characters, marking the cut with "...".
    Works on code points, so multi-byte text is never split mid-character.
    """
    if max_len < len(ELLIPSIS):
        raise ValueError(f"max_len must be at least {len(ELLIPSIS)}, got {max_len}")
    if len(s) <= max_len:
        return s
    return s[: max_len - len(ELLIPSIS)] + ELLIPSIS


def get_str_field(tool_input: Any, key: str) -> str:
    """Return `tool_input[key]` when it is a string, else the "?" placeholder."""
    if not isinstance(tool_input, Mapping):
        return PLACEHOLDER
    value = tool_input.get(key)
    return value if isinstance(value, str) else PLACEHOLDER


ToolRenderer = Callable[[Any], str]


def _field_renderer(label: str, key: str, limit: Optional[int] = None) -> ToolRenderer:
    def render(tool_input: Any) -> str:
        value = get_str_field(tool_input, key)
        if limit is not None:
            value = truncate(value, limit)
        return f"{label}: {value}"

    return render


# Tool name -> renderer. Glyph spacing for Edit compensates for the
# variation selector in its emoji.
TOOL_RENDERERS: Dict[str, ToolRenderer] = {
    "Read": _field_renderer("📖 Read", "file_path"),
    "Edit": _field_renderer("✏️  Edit", "file_path"),
    "Write": _field_renderer("📝 Write", "file_path"),
    "Bash": _field_renderer("💻 Bash", "command", limit=MAX_LINE_LENGTH),
    "Glob": _field_renderer("🔍 Glob", "pattern"),
    "Grep": _field_renderer("🔎 Grep", "pattern"),
    "TodoWrite": lambda _input: "📋 TodoWrite",
    "Task": _field_renderer("🤖 Task", "description"),
}


def format_tool_use(name: str, tool_input: Any) -> str:
    """
    Transform a tool invocation into a one-line summary.
    Never fails: missing or wrong-typed fields render as "?".
    """
    renderer = TOOL_RENDERERS.get(name)
    if renderer is None:
        return f"{UNKNOWN_TOOL_MARKER} {name}"
    return renderer(tool_input)


def format_content_block(block: ContentBlock) -> Optional[str]:
    """
    Transform any ContentBlock into a human-readable line.
    Returns None for blocks that shouldn't be shown.
    """
    if isinstance(block, ToolUseBlock):
        return format_tool_use(block.name, block.input)
    elif isinstance(block, TextBlock):
        # Emptiness ignores surrounding whitespace, but the original text is shown
        if not is_blank(block.text):
            return block.text
    return None


def format_message(msg: StreamMessage) -> Optional[str]:
    """Render a decoded message, or return None when there is nothing to show."""
    if msg.kind == "assistant":
        content = msg.content
        if content is None:
            return None

        lines: List[str] = []
        for block in content:
            formatted = format_content_block(block)
            if formatted is not None:
                lines.append(formatted)
        return "\n".join(lines) if lines else None

    if msg.kind == "result":
        result_text = msg.result_text
        if result_text is None:
            return None
        return f"{DONE_MARKER} Done: {truncate(result_text, MAX_LINE_LENGTH)}"

    return None


def process_line(line: Union[str, bytes]) -> Optional[str]:
    """Decode and format one line; undecodable lines yield None."""
    try:
        msg = decode(line)
    except DecodeError:
        return None
    return format_message(msg)
