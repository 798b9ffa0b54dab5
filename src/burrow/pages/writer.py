"""Output writer — replace the generated routes module in one step.

The text goes to a hidden sibling file first and is then moved over the
target, so the bundler only ever sees the previous module or the complete
new one.
"""

from pathlib import Path

from burrow._errors import WriteError


def write_module(output_file: Path, text: str) -> int:
    """Write *text* to *output_file*, creating parent directories as needed.

    Returns:
        The number of bytes written.

    Raises:
        WriteError: If the directory cannot be created or the file written.

    """
    data = text.encode("utf-8")
    tmp_path = output_file.with_name(f".{output_file.name}.tmp")
    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_bytes(data)
        tmp_path.replace(output_file)
    except OSError as exc:
        if tmp_path.exists():
            tmp_path.unlink()
        msg = f"Failed to write routes module {output_file}: {exc}"
        raise WriteError(msg) from exc
    return len(data)
