"""Text and HTML descriptions of Sobol sequences."""

from typing import Callable, Sequence

Power = Callable[[int], str]


def _intervals(lb: Sequence[float], ub: Sequence[float], power: Power, cross: str) -> str:
    # collapse runs of identical [lb,ub] factors into [lb,ub]^count
    parts = [f"[{lb[0]},{ub[0]}]"]
    cnt = 1
    for i in range(1, len(lb)):
        if lb[i] == lb[i - 1] and ub[i] == ub[i - 1]:
            cnt += 1
            continue
        if cnt > 1:
            parts[-1] += power(cnt)
        parts.append(f"[{lb[i]},{ub[i]}]")
        cnt = 1
    if cnt > 1:
        parts[-1] += power(cnt)
    return cross.join(parts)


def _describe(seq, power: Power, cross: str) -> str:
    n = seq.ndims
    lb = getattr(seq, "lb", None)
    if lb is None:
        return f"{n}-dimensional Sobol sequence on [0,1]{power(n)}"
    head = f"{n}-dimensional scaled {seq.dtype} Sobol sequence"
    if n == 0:
        return head
    return f"{head} on {_intervals(lb, seq.ub, power, cross)}"


def describe(seq) -> str:
    return _describe(seq, lambda k: f"^{k}", " x ")


def describe_html(seq) -> str:
    return _describe(seq, lambda k: f"<sup>{k}</sup>", " × ")
