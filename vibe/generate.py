from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from vibe.llm import LLMClient
from vibe.utils.files import write_output


@dataclass(frozen=True)
class GenerationResult:
    output_path: Path
    content: str


def generate_to_file(llm: LLMClient, output_path: Path, prompt: str) -> GenerationResult:
    # Nothing touches the output file until the reply has been fully extracted.
    content = llm.complete(prompt)
    write_output(output_path, content)
    return GenerationResult(output_path=output_path, content=content)
