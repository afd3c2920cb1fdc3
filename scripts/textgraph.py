#!/usr/bin/env python3
"""
Text-to-Graph CLI - build a word graph from a text file and query it.

Usage:
    python scripts/textgraph.py corpus.txt
    python scripts/textgraph.py corpus.txt --bridge the sat
    python scripts/textgraph.py corpus.txt --generate "Seek to explore new and exciting synergies"
    python scripts/textgraph.py corpus.txt --path the mat
    python scripts/textgraph.py corpus.txt --path the
    python scripts/textgraph.py corpus.txt --walk --seed 42
    python scripts/textgraph.py corpus.txt --show

Without an action flag, an interactive menu is shown:
    1. Show directed graph
    2. Query bridge words
    3. Generate new text with bridge words
    4. Find shortest path between two words
    5. Random walk
    6. Exit
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from textgraph.config import (  # noqa: E402
    GRAPH_HTML_PATH,
    LOG_LEVEL,
    RANDOM_SEED,
    WALK_OUTPUT_PATH,
)
from textgraph.graph import build_graph_from_file  # noqa: E402
from textgraph.queries.random_walk import ContinueCallback  # noqa: E402
from textgraph.session import TextGraphSession  # noqa: E402

MENU = """
Select an option:
1. Show directed graph
2. Query bridge words
3. Generate new text with bridge words
4. Find shortest path between two words
5. Random walk
6. Exit"""


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Build a word graph from text and query it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "file",
        type=Path,
        nargs="?",
        help="Text file to build the graph from (prompted for if omitted)",
    )
    parser.add_argument(
        "--bridge",
        nargs=2,
        metavar=("WORD1", "WORD2"),
        help="Print the bridge words from WORD1 to WORD2",
    )
    parser.add_argument(
        "--generate",
        type=str,
        metavar="TEXT",
        help="Insert bridge words into TEXT",
    )
    parser.add_argument(
        "--path",
        nargs="+",
        metavar="WORD",
        help="Shortest path from WORD1 to WORD2, or to every word if only WORD1 is given",
    )
    parser.add_argument(
        "--walk",
        action="store_true",
        help="Run a random walk and write it to --walk-output",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Render the graph to --graph-output as HTML",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=RANDOM_SEED,
        help="Random seed for generation and walks (default: TEXTGRAPH_SEED or unseeded)",
    )
    parser.add_argument(
        "--walk-output",
        type=Path,
        default=WALK_OUTPUT_PATH,
        help=f"File the random walk is written to (default: {WALK_OUTPUT_PATH})",
    )
    parser.add_argument(
        "--graph-output",
        type=Path,
        default=GRAPH_HTML_PATH,
        help=f"HTML file for --show (default: {GRAPH_HTML_PATH})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)
    if args.path is not None and len(args.path) > 2:
        parser.error("--path takes one or two words")
    return args


def show_graph(session: TextGraphSession, output: Path) -> bool:
    """Render the graph to an HTML file. Returns False if it cannot be written."""
    from ui.components.charts import save_word_graph_html

    nodes, edges = session.show_graph()
    try:
        path = save_word_graph_html(nodes, edges, output)
    except OSError as e:
        print(f"Error: could not write {output}: {e}", file=sys.stderr)
        return False
    print(f"Graph with {len(nodes)} words and {len(edges)} edges written to {path}")
    return True


def run_walk(
    session: TextGraphSession,
    output: Path,
    should_continue: ContinueCallback | None = None,
) -> bool:
    """Run a random walk and write it to output. Returns False if the write fails."""
    try:
        result = session.random_walk(should_continue=should_continue, output_path=output)
    except OSError as e:
        print(f"Random walk path: {session.last_walk.render()}")
        print(f"Error: could not write {output}: {e}", file=sys.stderr)
        return False
    print(f"Random walk path: {result}")
    return True


def shortest_path(session: TextGraphSession, words: list[str]) -> str:
    if len(words) == 1:
        return session.calc_shortest_paths(words[0])
    return session.calc_shortest_path(words[0], words[1])


def ask_to_continue(path: list[str]) -> bool:
    """Interactive cancellation check for random walks."""
    print(f"Current node: {path[-1]}")
    answer = input("Press Enter to continue or type 'stop' to end the walk.\n")
    return answer.strip().lower() != "stop"


def interactive_menu(session: TextGraphSession, args: argparse.Namespace) -> None:
    """Numbered menu loop until the user picks Exit."""
    while True:
        print(MENU)
        choice = input().strip()

        if choice == "1":
            show_graph(session, args.graph_output)
        elif choice == "2":
            word1 = input("Enter word1: \n")
            word2 = input("Enter word2: \n")
            print(session.query_bridge_words(word1, word2))
        elif choice == "3":
            text = input("Enter new text: \n")
            print(f"Generated text: {session.generate_new_text(text)}")
        elif choice == "4":
            start = input("Enter start word: \n")
            end = input("Enter end word (leave empty for all words): \n")
            words = [start, end] if end.strip() else [start]
            print(shortest_path(session, words))
        elif choice == "5":
            run_walk(session, args.walk_output, should_continue=ask_to_continue)
        elif choice == "6":
            return
        else:
            print("Invalid choice. Try again.")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    file_path = args.file or Path(input("Enter the file path: \n").strip())

    try:
        graph = build_graph_from_file(file_path)
    except OSError as e:
        print(f"Error: could not read {file_path}: {e}", file=sys.stderr)
        return 1

    session = TextGraphSession(graph, seed=args.seed)

    has_action = args.bridge or args.generate is not None or args.path or args.walk or args.show
    if not has_action:
        try:
            interactive_menu(session, args)
        except (KeyboardInterrupt, EOFError):
            print("\n\nInterrupted by user")
            return 130  # Standard exit code for Ctrl+C
        return 0

    ok = True
    if args.show:
        ok = show_graph(session, args.graph_output)
    if args.bridge:
        print(session.query_bridge_words(*args.bridge))
    if args.generate is not None:
        print(f"Generated text: {session.generate_new_text(args.generate)}")
    if args.path:
        print(shortest_path(session, args.path))
    if args.walk:
        ok = run_walk(session, args.walk_output) and ok

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
