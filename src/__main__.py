#!/usr/bin/env python3
"""
cmark2tex - CommonMark to LaTeX fragment translator

Translates a markdown chapter into a LaTeX fragment (no preamble, no
\\begin{document}) for inclusion in a larger document build.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Key Features:
    - Sectioning commands with exact-text and slug labels for every heading
    - longtable tables with synthesized equal-width columns
    - Inline math passthrough (\\( ... \\), \\[ ... \\])
    - Local links resolved to the title of the linked chapter
    - SVG images rasterized to PNG siblings
    - Embedded HTML translated through markdown

Usage:
    cmark2tex inputdir/ outputdir/ --inputFile chapter.md

    The fragment is written to outputdir/ as chapter.tex unless
    --outputFile names another file.

Examples:
    # Basic translation
    cmark2tex . build/ --inputFile intro.md

    # Resolve local links against a specific document tree
    cmark2tex src/ build/ --inputFile intro.md --linkRoot src/

    # Verbose output
    cmark2tex . build/ --inputFile intro.md -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .lib import markdown_toTex, Cmark2TexError, __version__, LOG, state_connectToLogger
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
                      _    ____  _
   ___ _ __ ___   __ _| | _|___ \| |_ _____  __
  / __| '_ ` _ \ / _` | |/ / __) | __/ _ \ \/ /
 | (__| | | | | | (_| |   < / __/| ||  __/>  <
  \___|_| |_| |_|\__,_|_|\_\_____|\__\___/_/\_\

  CommonMark to LaTeX fragment translator
"""

# Define CLI arguments
parser = ArgumentParser(
    description="cmark2tex - CommonMark to LaTeX fragment translator",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Input markdown file (relative to inputdir)"
)

parser.add_argument(
    "--outputFile",
    default="",
    type=str,
    help="Output .tex file (relative to outputdir). Defaults to the input name with .tex",
)

parser.add_argument(
    "--linkRoot",
    default=None,
    type=str,
    help="Document tree searched when resolving local links. Defaults to CMARK2TEX_LINK_ROOT",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve all file paths.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the markdown input
            - texOutputFile: Resolved path of the .tex fragment
            - envOK: True if environment is valid

    Exits:
        1 if no input file was given or it does not exist
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    if not state.inputFile.strip():
        print("Error: Missing argument, must provide input + output", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    input_file = state.inputdir / state.inputFile

    if not input_file.is_file():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    output_name = state.outputFile or str(Path(state.inputFile).with_suffix(".tex"))
    state.texOutputFile = state.outputdir / output_name
    state.texOutputFile.parent.mkdir(parents=True, exist_ok=True)
    LOG(f"Output file: {state.texOutputFile}", level=2)

    state.envOK = True
    return state


def source_read(inputstate: ProgramState) -> ProgramState:
    """
    Read the markdown source file.

    Returns:
        ProgramState with added field:
            - sourceText: Document text

    Exits:
        1 if the file cannot be read
    """

    state = inputstate.copy()

    LOG("Reading source file...", level=1)

    try:
        state.sourceText = state.inputSourceFile.read_text(encoding="utf-8")
        LOG(f"Read {len(state.sourceText)} characters from {state.inputSourceFile.name}", level=2)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)
    return state


def tex_translate(inputstate: ProgramState) -> ProgramState:
    """
    Translate the markdown source to a LaTeX fragment.

    Returns:
        ProgramState with added field:
            - texResult: LaTeX fragment

    Exits:
        1 if sourceText is missing or translation fails
    """

    state = inputstate.copy()

    LOG("Translating markdown to LaTeX...", level=1)

    if state.sourceText is None:
        print("Error: No source text available", file=sys.stderr)
        sys.exit(1)

    try:
        state.texResult = markdown_toTex(state.sourceText, link_root=state.linkRoot)
        LOG(f"Translation complete: {len(state.texResult)} characters", level=2)
    except (Cmark2TexError, OSError) as e:
        print(f"Translation error: {e}", file=sys.stderr)
        if state.verbosity >= 3:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    return state


def output_write(inputstate: ProgramState) -> ProgramState:
    """
    Write the LaTeX fragment to the output file.

    Returns:
        ProgramState with added field:
            - writeResult: Dict containing:
                - output_file: str (path written)
                - characters: int (fragment length)

    Exits:
        1 if there is nothing to write or the write fails
    """

    state = inputstate.copy()

    if state.texResult is None:
        print("Error: Translation failed", file=sys.stderr)
        sys.exit(1)

    try:
        state.texOutputFile.write_text(state.texResult, encoding="utf-8")
    except OSError as e:
        print(f"Error writing output file: {e}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Wrote {state.texOutputFile}", level=2)
    state.writeResult = {
        'output_file': str(state.texOutputFile),
        'characters': len(state.texResult),
    }
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display translation results to user.

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if writeResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.writeResult:
        print("Error: Nothing was written", file=sys.stderr)
        sys.exit(1)

    if state.verbosity >= 1:
        LOG("\n✓ Translation successful!", level=1)
        LOG(f"  Output: {state.writeResult['output_file']}", level=1)
        LOG(f"  Characters: {state.writeResult['characters']}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="cmark2tex - CommonMark to LaTeX fragment translator",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - translate a markdown chapter to a LaTeX fragment.

    Orchestrates the full pipeline:
        1. env_check: Validate paths and environment
        2. source_read: Read the markdown source
        3. tex_translate: Translate to LaTeX
        4. output_write: Write the .tex fragment
        5. results_report: Display results to user

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, source_read, tex_translate, output_write, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
