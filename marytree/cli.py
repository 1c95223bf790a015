"""Read a tree and a list of lock queries, and print each query's outcome."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from functools import partial

from marytree.tree import LockingTree


class Operation(Enum):
    LOCK = 1
    UNLOCK = 2
    UPGRADE = 3

    @classmethod
    def from_code(cls, code: int) -> Operation:
        """Map a query type; every code other than 1 and 2 means upgrade."""
        if code == 1:
            return cls.LOCK
        if code == 2:
            return cls.UNLOCK
        return cls.UPGRADE


@dataclass(frozen=True)
class Query:
    operation: Operation
    name: str
    uid: int


@dataclass(frozen=True)
class Problem:
    names: list[str]
    arity: int
    queries: list[Query]

    def build_tree(self) -> LockingTree:
        return LockingTree(self.names, self.arity)


def _count(value: str, what: str) -> int:
    number = int(value)
    if number < 0:
        raise ValueError(f"{what} must not be negative, got {number}")
    return number


def parse_input(text: str) -> Problem:
    """Parse ``N m Q``, N names and Q ``type name uid`` triples."""
    tokens = iter(text.split())

    def take() -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    count = _count(take(), "node count")
    arity = int(take())
    query_count = _count(take(), "query count")
    names = [take() for _ in range(count)]
    queries = []
    for _ in range(query_count):
        code = int(take())
        name = take()
        uid = int(take())
        queries.append(Query(Operation.from_code(code), name, uid))
    return Problem(names, arity, queries)


def apply_query(tree: LockingTree, query: Query) -> bool:
    handlers = {
        Operation.LOCK: tree.lock,
        Operation.UNLOCK: tree.unlock,
        Operation.UPGRADE: tree.upgrade,
    }
    return handlers[query.operation](query.name, query.uid)


def run_queries(tree: LockingTree, queries: Iterable[Query]) -> list[bool]:
    return [apply_query(tree, query) for query in queries]


def run_queries_concurrently(tree: LockingTree, queries: Iterable[Query]) -> list[bool]:
    """Run every query on its own thread; results follow the queries' order."""
    pending = list(queries)
    if not pending:
        return []
    with ThreadPoolExecutor(max_workers=len(pending)) as executor:
        return list(executor.map(partial(apply_query, tree), pending))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="marytree", description=__doc__)
    parser.add_argument("input", nargs="?", default="-", help="input file, '-' for stdin")
    parser.add_argument("--concurrent", action="store_true", help="run each query on its own thread")
    args = parser.parse_args(argv)

    try:
        if args.input == "-":
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        problem = parse_input(text)
        tree = problem.build_tree()
        runner = run_queries_concurrently if args.concurrent else run_queries
        results = runner(tree, problem.queries)
    except (OSError, ValueError, KeyError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for result in results:
        print("true" if result else "false")
    return 0


if __name__ == "__main__":
    sys.exit(main())