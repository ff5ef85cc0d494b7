#!/usr/bin/env python3
"""Quick perf benchmark: parse, reduce and rewrite JSON documents."""

from __future__ import annotations

import argparse
import cProfile
import io
import json
from pathlib import Path
import pstats
import statistics
import time
from typing import Any

from tqdm import tqdm

from hanslope.cst import CstNode
from hanslope.matchers import (
    Matcher,
    choice,
    label_fail,
    literal,
    many,
    maybe,
    ref,
    regex,
    seq,
    tag,
)
from hanslope.pipeline import parse
from hanslope.transform import bind_any, bind_leaf, bind_sequence, rule

JSON: dict[str, Matcher[CstNode]] = {}
JSON["String"] = tag("string", regex(r'"(?:[^"\\]|\\.)*"'))
JSON["Number"] = tag("number", regex(r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][+-]?\d+)?"))
JSON["Keyword"] = tag("keyword", regex(r"true|false|null"))
JSON["Member"] = seq(
    tag("key", ref(JSON, "String")),
    label_fail(literal(":"), "noColon"),
    tag("value", label_fail(ref(JSON, "Value"), "noValue")),
)
JSON["Object"] = tag(
    "object",
    seq(
        literal("{"),
        maybe(seq(ref(JSON, "Member"), many(seq(literal(","), ref(JSON, "Member"))))),
        label_fail(literal("}"), "unclosedObject"),
    ),
)
JSON["Array"] = tag(
    "array",
    seq(
        literal("["),
        maybe(
            seq(
                tag("item", ref(JSON, "Value")),
                many(seq(literal(","), tag("item", label_fail(ref(JSON, "Value"), "noValue")))),
            )
        ),
        label_fail(literal("]"), "unclosedArray"),
    ),
)
JSON["Value"] = choice(
    ref(JSON, "Object"),
    ref(JSON, "Array"),
    ref(JSON, "String"),
    ref(JSON, "Number"),
    ref(JSON, "Keyword"),
)

_KEYWORDS: dict[str, Any] = {"true": True, "false": False, "null": None}


def _single_member(member: Any) -> dict[str, Any]:
    # An empty object reduces to its bracket text.
    return dict([member]) if isinstance(member, tuple) else {}


JSON_RULES = (
    rule({"string": bind_leaf("s")}, lambda s: json.loads(s)),
    rule({"number": bind_leaf("n")}, lambda n: json.loads(n)),
    rule({"keyword": bind_leaf("k")}, lambda k: _KEYWORDS[k]),
    rule({"key": bind_leaf("key"), "value": bind_any("value")}, lambda key, value: (key, value)),
    rule({"item": bind_any("item")}, lambda item: [item]),
    # One member/item reduces to a single branch, several to a sequence.
    rule({"object": bind_sequence("members")}, lambda members: dict(members)),
    rule({"object": bind_leaf("member")}, _single_member),
    rule({"array": bind_sequence("items")}, lambda items: [item for chunk in items for item in chunk]),
    rule({"array": bind_leaf("item")}, lambda item: item if isinstance(item, list) else []),
)


def _collect_json_files(root: Path) -> list[Path]:
    return sorted(path for path in root.rglob("*.json") if path.is_file())


def _run_once(
    files: list[Path],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_chars = 0
    total_diagnostics = 0
    iterator = tqdm(files, desc=label, unit="file") if show_progress else files
    for path in iterator:
        text = path.read_text(encoding="utf-8")
        result = parse(JSON["Value"], text, rules=JSON_RULES)
        total_chars += len(text)
        total_diagnostics += len(result.diagnostics)
        if result.ok:
            result.ast_root()
    duration = time.perf_counter() - start
    return duration, total_chars, total_diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark JSON parsing throughput")
    parser.add_argument("root", type=Path, help="Directory searched recursively for *.json files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    args = parser.parse_args()

    root: Path = args.root
    if not root.is_dir():
        raise SystemExit(f"Invalid root directory: {root}")

    files = _collect_json_files(root)
    if not files:
        raise SystemExit(f"No .json files found under {root}")

    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(files, label=f"warmup {warmup_idx + 1}", show_progress=show_progress)

        timings: list[float] = []
        chars = 0
        diagnostics = 0
        for run_idx in range(max(args.runs, 1)):
            duration, chars, diagnostics = _run_once(
                files,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, chars, diagnostics

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, chars, diagnostics = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        pstats.Stats(profiler, stream=stream).sort_stats("tottime").print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, chars, diagnostics = _benchmark()

    mean = statistics.mean(timings)
    print(f"Dataset: {root}")
    print(f"Files: {len(files)}")
    print(f"Characters: {chars}")
    print(f"Diagnostics: {diagnostics}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Chars/s (mean): {chars / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
