"""
Synthetic AMFI NAVAll feed generator.

Writes a deterministic pseudo-random feed with the same structure as the
published file: column header, section titles, fund-house names, blank
lines and `;`-separated scheme rows, some of them with an N.A. NAV. Useful
for exercising the extractor offline.
"""

from __future__ import annotations

import random
import sys
import time
from datetime import date, timedelta
from pathlib import Path
from typing import Dict, List

import typer

app = typer.Typer(help="Generate a synthetic AMFI NAVAll.txt feed.")

FEED_HEADER = (
    "Scheme Code;ISIN Div Payout/ ISIN Growth;ISIN Div Reinvestment;"
    "Scheme Name;Net Asset Value;Date"
)
SECTIONS = [
    "Open Ended Schemes(Debt Scheme - Banking and PSU Fund)",
    "Open Ended Schemes(Equity Scheme - Large Cap Fund)",
    "Close Ended Schemes(Income)",
    "Interval Fund Schemes(Income)",
]
FUND_HOUSES = [
    "Aditya Birla Sun Life Mutual Fund",
    "Axis Mutual Fund",
    "HDFC Mutual Fund",
    "Nippon India Mutual Fund",
]
PLANS = ["Growth", "IDCW", "Direct Plan-Growth", "Regular Plan-IDCW"]


def _isin(rng: random.Random) -> str:
    return "INF" + "".join(rng.choice("0123456789ABCDEFGHJK") for _ in range(9))


def _generate_feed(
    feed_path: Path,
    schemes_per_house: int,
    seed: int,
    na_ratio: float = 0.1,
    line_ending: str = "\n",
) -> Dict[str, int]:
    """
    Write a feed to `feed_path` and return the counts it contains.

    Keys: ``records`` (scheme rows), ``numeric`` and ``not_available``.
    """
    rng = random.Random(seed)
    nav_date = date(2024, 1, 15) - timedelta(days=rng.randint(0, 30))
    counts = {"records": 0, "numeric": 0, "not_available": 0}
    code = 100_000 + rng.randint(0, 9_999)

    lines: List[str] = [FEED_HEADER, ""]
    for section in SECTIONS:
        lines.extend([section, ""])
        for house in FUND_HOUSES:
            lines.extend([house, ""])
            for _ in range(schemes_per_house):
                code += 1
                name = f"{house.replace(' Mutual Fund', '')} Fund {code % 97} - {rng.choice(PLANS)}"
                if rng.random() < na_ratio:
                    nav = "N.A."
                    counts["not_available"] += 1
                else:
                    nav = f"{rng.uniform(9, 5_000):.4f}"
                    counts["numeric"] += 1
                counts["records"] += 1
                reinvest = _isin(rng) if rng.random() < 0.5 else "-"
                lines.append(
                    f"{code};{_isin(rng)};{reinvest};{name};{nav};{nav_date:%d-%b-%Y}"
                )
            lines.append("")

    feed_path.parent.mkdir(parents=True, exist_ok=True)
    with feed_path.open("w", encoding="utf-8", newline="") as f:
        f.write(line_ending.join(lines) + line_ending)
    return counts


@app.command()
def main(
    schemes: int = typer.Option(
        25,
        "--schemes",
        "-n",
        help="Scheme rows per fund house and section.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    na_ratio: float = typer.Option(
        0.1,
        "--na-ratio",
        help="Share of rows published with an N.A. NAV.",
    ),
    crlf: bool = typer.Option(
        False,
        "--crlf",
        help="Terminate lines with CRLF like the published file.",
    ),
    output: Path = typer.Option(
        Path("NAVAll.txt"),
        "--output",
        "-o",
        help="Feed output path.",
    ),
) -> None:
    """
    Generate a synthetic NAVAll.txt feed.
    """
    start = time.perf_counter()
    counts = _generate_feed(
        output,
        schemes_per_house=schemes,
        seed=seed,
        na_ratio=na_ratio,
        line_ending="\r\n" if crlf else "\n",
    )
    duration = time.perf_counter() - start
    typer.echo(
        f"Wrote {counts['records']:,} scheme rows -> {output} "
        f"({counts['not_available']:,} N.A.) in {duration:.2f}s"
    )


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
