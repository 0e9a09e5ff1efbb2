# src/domaincloud/core/cloud.py
import subprocess
from pathlib import Path
from typing import List

from domaincloud.config import IMAGE_HEIGHT, IMAGE_WIDTH, RENDERER_PROGRAM
from domaincloud.errors import RenderError


def build_render_command(text_file: Path, image_file: str, program: str = RENDERER_PROGRAM,
                         width: int = IMAGE_WIDTH, height: int = IMAGE_HEIGHT) -> List[str]:
    return [
        program,
        "--text", str(text_file),
        "--imagefile", image_file,
        f"--width={width}",
        f"--height={height}",
    ]


def generate_word_cloud(text_file: Path, image_file: str, program: str = RENDERER_PROGRAM,
                        width: int = IMAGE_WIDTH, height: int = IMAGE_HEIGHT) -> None:
    """
    Runs the external renderer on a word list with one word per line.
    Raises RenderError if the program cannot be started or exits non-zero.
    """
    cmd = build_render_command(text_file, image_file, program, width, height)
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        raise RenderError(f"Could not run '{program}': {e}") from e

    if result.returncode != 0:
        detail = result.stderr.strip() or f"exit status {result.returncode}"
        raise RenderError(f"'{program}' failed: {detail}")
