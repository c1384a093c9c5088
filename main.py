"""
Count word frequencies with a symbol table.

Reads a text file, counts the words at least `--min-length` characters long
in an ordered symbol table, and reports the most frequent one.

Tables available:
- bst: Unbalanced binary search tree
- rbt: Left-leaning red-black BST (default)
"""

import logging
import sys

from constants import DEBUG, DEFAULT_TABLE, MIN_LENGTH, TABLES
from symboltables import TABLE_FACTORIES, FrequencyCounter
from symboltables.statistics import CostTrace
from utils.display import display_statistics, display_table

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s | %(message)s",
)
logger = logging.getLogger(__name__)


def count_words(
    path: str,
    min_length: int = MIN_LENGTH,
    table: str = DEFAULT_TABLE,
    show_stats: bool = False,
    show_tree: bool = False,
) -> FrequencyCounter:
    """
    Count the words of a text file.

    Args:
        path: Text file, or the name of a corpus in the resources directory.
        min_length: Words shorter than this are skipped.
        table: Name of the table implementation ("bst" or "rbt").
        show_stats: Whether to report the average put cost and tree height.
        show_tree: Whether to render the resulting tree.

    Returns:
        The FrequencyCounter holding the counts and the table.
    """
    if table not in TABLE_FACTORIES:
        raise ValueError(f"Unknown table {table!r}, expected one of {TABLES}")

    trace = CostTrace()
    factory = TABLE_FACTORIES[table]
    logger.info(f"Counting words of {path} (min length {min_length}, table {table})")

    counter = FrequencyCounter.from_path(path, min_length, lambda: factory(trace))

    logger.info(f"{counter.words} words, {counter.distinct} distinct")
    logger.info(f"Most frequent: {counter.max!r} ({counter.frequency} times)")

    if show_stats:
        display_statistics(counter.statistics(), counter.distinct)
        averages = trace.running_average()
        if len(averages):
            logger.debug(f"Running average after last put: {averages[-1]:.2f}")
        logger.info(f"Tree height: {counter.table.height()}")

    if show_tree:
        display_table(counter.table)

    return counter


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Count word frequencies")
    parser.add_argument("path", help="Text file (or name of a bundled corpus)")
    parser.add_argument(
        "--min-length",
        type=int,
        default=MIN_LENGTH,
        help="Ignore words shorter than this",
    )
    parser.add_argument(
        "--table",
        choices=TABLES,
        default=DEFAULT_TABLE,
        help="Symbol table implementation",
    )
    parser.add_argument("--stats", action="store_true", help="Report put costs")
    parser.add_argument("--tree", action="store_true", help="Render the tree")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    if args.debug or DEBUG:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        counter = count_words(
            path=args.path,
            min_length=args.min_length,
            table=args.table,
            show_stats=args.stats,
            show_tree=args.tree,
        )
    except (FileNotFoundError, ValueError) as error:
        logger.error(str(error))
        sys.exit(1)

    print(f"{counter.max} {counter.frequency}")
