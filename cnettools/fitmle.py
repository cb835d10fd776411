"""Maximum-likelihood power-law fits with a Kolmogorov-Smirnov goodness test."""

from __future__ import annotations

import math
import random
import sys
from bisect import bisect_left
from contextlib import contextmanager
from dataclasses import dataclass, replace
from itertools import groupby
from typing import Callable, Iterable, Iterator, Sequence, TextIO


@dataclass(frozen=True)
class PowerLawFit:
    """Exponent, lower cut-off and KS distance of a fit, plus an optional p-value."""

    alpha: float
    xmin: float
    ks: float
    p_value: float | None = None

    def __str__(self) -> str:
        fields = [self.alpha, self.xmin, self.ks]
        if self.p_value is not None:
            fields.append(self.p_value)
        return " ".join(f"{value:g}" for value in fields)


FitFunction = Callable[[Sequence[float], float], PowerLawFit]


def load_data(lines: Iterable[str]) -> list[float]:
    """Sorted values taken from the first field of each line.

    Lines whose first field starts with ``#`` and blank lines are skipped.
    """
    values: list[float] = []
    for lineno, line in enumerate(lines, 1):
        fields = line.split()
        if not fields or fields[0].startswith("#"):
            continue
        try:
            values.append(float(fields[0]))
        except ValueError as exc:
            raise ValueError(f"line {lineno}: invalid value {fields[0]!r}") from exc
    values.sort()
    return values


def find_first(x: float, data: Sequence[float]) -> int | None:
    """Index of the first occurrence of ``x`` in sorted ``data``, or None."""
    idx = bisect_left(data, x)
    if idx < len(data) and data[idx] == x:
        return idx
    return None


def _fit_alpha(data: Sequence[float], idx: int, denominator: float) -> float:
    if not 0 <= idx < len(data):
        raise ValueError("the cut-off index is out of range")
    if denominator <= 0:
        raise ValueError("power-law fits need positive values")
    total = sum(math.log(value / denominator) for value in data[idx:])
    if total == 0:
        return math.inf
    return 1 + (len(data) - idx) / total


def fit_alpha_discrete(data: Sequence[float], xmin: float, idx: int) -> float:
    """MLE exponent of a discrete power law for the values from ``idx`` on."""
    return _fit_alpha(data, idx, xmin - 0.5)


def fit_alpha_continuous(data: Sequence[float], xmin: float, idx: int) -> float:
    """MLE exponent of a continuous power law for the values from ``idx`` on."""
    return _fit_alpha(data, idx, xmin)


def ks_statistic(data: Sequence[float], alpha: float, idx: int) -> float:
    """Largest distance between the empirical and power-law cumulative tails."""
    n = len(data)
    if not 0 <= idx < n:
        raise ValueError("the cut-off index is out of range")
    xmin = data[idx]
    tail = n - idx
    c_data = 0.0
    max_dist = -1.0
    seen = 0
    for value, group in groupby(data[idx:]):
        count = sum(1 for _ in group)
        c_theo = 1.0 - (xmin / value) ** (alpha - 1.0)
        max_dist = max(max_dist, abs(c_theo - c_data))
        seen += count
        c_data = seen / tail
    return max_dist


def _best_fit(
    data: Sequence[float],
    tol: float,
    fit_alpha: Callable[[Sequence[float], float, int], float],
) -> PowerLawFit:
    values = sorted(data)
    if not values:
        raise ValueError("no data to fit")
    n = len(values)
    best_ks = 10000000.0
    best_alpha = 0.0
    best_x = values[0]
    cur_alpha = 0.0
    idx = 0
    for x, _ in groupby(values):
        if not cur_alpha / math.sqrt(n - idx) < tol:
            break
        idx = bisect_left(values, x)
        cur_alpha = fit_alpha(values, x, idx)
        ks = ks_statistic(values, cur_alpha, idx)
        if ks < best_ks:
            best_ks = ks
            best_alpha = cur_alpha
            best_x = values[idx]
    ks = ks_statistic(values, best_alpha, bisect_left(values, best_x))
    return PowerLawFit(best_alpha, best_x, ks)


def best_fit_discrete(data: Sequence[float], tol: float = 0.1) -> PowerLawFit:
    """Discrete power-law fit choosing the cut-off with the smallest KS distance.

    Cut-offs are tried in increasing order while alpha / sqrt(n_tail) < ``tol``.
    """
    return _best_fit(data, tol, fit_alpha_discrete)


def best_fit_continuous(data: Sequence[float], tol: float = 0.1) -> PowerLawFit:
    """Continuous counterpart of :func:`best_fit_discrete`."""
    return _best_fit(data, tol, fit_alpha_continuous)


def is_continuous(data: Iterable[float]) -> bool:
    """True if any value has a fractional part."""
    return any(not float(value).is_integer() for value in data)


def sample_powerlaw(
    data: Sequence[float],
    alpha: float,
    xmin: float,
    rng: random.Random | None = None,
) -> list[float]:
    """A synthetic data set shaped like ``data``.

    Values below ``xmin`` are resampled from the data up to and including the
    cut-off; the rest are drawn from a power law and rounded down.
    """
    if alpha <= 1:
        raise ValueError("the exponent must be larger than 1")
    values = sorted(data)
    below = bisect_left(values, xmin)
    if below >= len(values):
        raise ValueError("xmin is larger than every value")
    rng = rng or random.Random()
    head = [values[rng.randrange(below + 1)] for _ in range(below)]
    exponent = -1.0 / (alpha - 1.0)
    tail = [
        float(math.floor(xmin * (1.0 - rng.random()) ** exponent))
        for _ in range(len(values) - below)
    ]
    return head + tail


def test_powerlaw(
    data: Sequence[float],
    alpha: float,
    xmin: float,
    ks: float,
    num_test: int = 100,
    fit: FitFunction = best_fit_discrete,
    rng: random.Random | None = None,
) -> float:
    """Fraction of bootstrapped samples whose fit has a KS distance above ``ks``."""
    if num_test < 1:
        raise ValueError("the number of tests must be positive")
    rng = rng or random.Random()
    exceeding = sum(
        1
        for _ in range(num_test)
        if fit(sample_powerlaw(data, alpha, xmin, rng), 0.1).ks > ks
    )
    return exceeding / num_test


@contextmanager
def _open_data(path: str) -> Iterator[TextIO]:
    if path == "-":
        yield sys.stdin
    else:
        with open(path, encoding="utf-8") as handle:
            yield handle


def main(argv: Sequence[str] | None = None) -> int:
    """Fit a power law: ``fitmle <data_in> [<tol> [TEST [<num_test>]]]``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Fit a set of values with a power-law function using the MLE.")
        print("Usage: fitmle <data_in> [<tol> [ TEST [<num_test>]]]")
        return 1
    try:
        tol = float(args[1]) if len(args) > 1 else 0.1
        num_test = int(args[3]) if len(args) > 3 else 100
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    run_test = len(args) > 2 and args[2].lower() == "test"

    try:
        with _open_data(args[0]) as handle:
            data = load_data(handle)
    except OSError as exc:
        print(f"Error opening file {args[0]}: {exc.strerror or exc}", file=sys.stderr)
        return 3
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 3
    if not data:
        print("Error: no data to fit", file=sys.stderr)
        return 3

    if is_continuous(data):
        print("Using continuous fit", file=sys.stderr)
        fit: FitFunction = best_fit_continuous
    else:
        print("Using discrete fit", file=sys.stderr)
        fit = best_fit_discrete

    try:
        result = fit(data, tol)
        if run_test:
            p_value = test_powerlaw(
                data, result.alpha, result.xmin, result.ks, num_test, fit
            )
            result = replace(result, p_value=p_value)
    except (ValueError, ZeroDivisionError, OverflowError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 4
    print(result)
    return 0