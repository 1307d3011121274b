"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the translation pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the translation progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, outputFile, linkRoot
        - env_check: inputSourceFile, texOutputFile, envOK
        - source_read: sourceText
        - tex_translate: texResult
        - output_write: writeResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the source .md file
        outputdir: Base output directory for the .tex fragment
        verbosity: Logging verbosity level (1-3)
        inputFile: Input markdown filename (relative to inputdir)
        outputFile: Output filename (relative to outputdir); derived from
                    inputFile when empty
        linkRoot: Optional document root for local link resolution
        envOK: Environment validation passed
        inputSourceFile: Resolved path to the input file
        texOutputFile: Resolved path to the output file
        sourceText: Markdown text read from inputSourceFile
        texResult: Translated LaTeX fragment
        writeResult: Write statistics (output_file, characters)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    outputFile: str = field(default="")
    linkRoot: Optional[str] = field(default=None)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    texOutputFile: Path = field(default=Path("/"))
    sourceText: Optional[str] = field(default=None)
    texResult: Optional[str] = field(default=None)
    writeResult: Optional[Dict[str, Any]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (inputFile, outputFile, etc.)
            inputdir: Directory containing source files
            outputdir: Directory for translation output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        # Drop argparse extras that are not state fields
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}

        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            source_read,
            tex_translate,
            output_write,
            results_report
        )

    This is equivalent to:
        results_report(output_write(tex_translate(source_read(env_check(initial_state)))))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
