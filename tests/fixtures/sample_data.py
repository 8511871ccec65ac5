"""
Sample stream-json records for testing.
"""

import json
from typing import Any, Dict, List, Optional


class SampleDataGenerator:
    """Builds stream-json lines in the shape the Claude CLI emits."""

    @staticmethod
    def assistant(*blocks: Dict[str, Any]) -> str:
        """Assistant record with the given content blocks."""
        return json.dumps(
            {
                "type": "assistant",
                "message": {"role": "assistant", "content": list(blocks)},
                "session_id": "sess-1",
            }
        )

    @staticmethod
    def text(text: str) -> Dict[str, Any]:
        return {"type": "text", "text": text}

    @staticmethod
    def tool_use(name: str, tool_input: Any = None, tool_id: str = "toolu_01") -> Dict[str, Any]:
        return {
            "type": "tool_use",
            "id": tool_id,
            "name": name,
            "input": {} if tool_input is None else tool_input,
        }

    @staticmethod
    def result(text: Optional[str] = "Task completed successfully.") -> str:
        record: Dict[str, Any] = {
            "type": "result",
            "subtype": "success",
            "is_error": False,
            "duration_ms": 1234,
            "num_turns": 3,
        }
        if text is not None:
            record["result"] = text
        return json.dumps(record)

    @classmethod
    def session(cls) -> List[str]:
        """A short, realistic session including records the filter ignores."""
        return [
            json.dumps({"type": "system", "subtype": "init", "cwd": "/src", "tools": ["Read", "Bash"]}),
            cls.assistant(cls.text("I'll look at the failing test first.")),
            cls.assistant(cls.tool_use("Read", {"file_path": "/src/tests/test_app.py"})),
            json.dumps(
                {
                    "type": "user",
                    "message": {
                        "role": "user",
                        "content": [{"type": "tool_result", "tool_use_id": "toolu_01", "content": "..."}],
                    },
                }
            ),
            cls.assistant({"type": "thinking", "thinking": "The fixture is wrong."}),
            cls.assistant(cls.tool_use("Bash", {"command": "pytest -x"})),
            cls.result("All tests pass."),
        ]


# Expected output for SampleDataGenerator.session()
SESSION_OUTPUT = [
    "I'll look at the failing test first.",
    "📖 Read: /src/tests/test_app.py",
    "💻 Bash: pytest -x",
    "✅ Done: All tests pass.",
]
