"""Table-driven state machine for terminal escape sequences.

The reader feeds the bytes that follow an ESC one at a time. Each call to
``step`` returns the next state plus, once the sequence is complete, the
decoded key. Complete sequences outside the table decode to ``ESC``.
"""

from __future__ import annotations

from dataclasses import dataclass

ESC = "ESC"

# Parser states.
ESCAPE = "escape"
CSI = "csi"
CSI_PARAMS = "csi_params"
SS3 = "ss3"
CSI_DIGIT_PREFIX = "csi_digit:"

_ARROWS = {b"A": "UP", b"B": "DOWN", b"C": "RIGHT", b"D": "LEFT"}
_LINE_ENDS = {b"H": "HOME", b"F": "END"}
_TILDE_KEYS = {
    b"1": "HOME",
    b"3": "DELETE",
    b"4": "END",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
    b"7": "HOME",
    b"8": "END",
}


@dataclass(frozen=True)
class Step:
    """Result of feeding one byte.

    ``key`` is ``None`` while more bytes are needed. ``push_back`` asks the
    reader to replay the byte as the start of the next key.
    """

    state: str | None
    key: str | None = None
    push_back: bool = False


def _build_transitions() -> dict[tuple[str, bytes], Step]:
    table: dict[tuple[str, bytes], Step] = {
        (ESCAPE, b"["): Step(CSI),
        (ESCAPE, b"O"): Step(SS3),
    }
    for byte, key in {**_ARROWS, **_LINE_ENDS}.items():
        table[(CSI, byte)] = Step(None, key)
        table[(SS3, byte)] = Step(None, key)
    for value in range(10):
        digit = str(value).encode("ascii")
        table[(CSI, digit)] = Step(CSI_DIGIT_PREFIX + digit.decode("ascii"))
    for digit, key in _TILDE_KEYS.items():
        table[(CSI_DIGIT_PREFIX + digit.decode("ascii"), b"~")] = Step(None, key)
    return table


TRANSITIONS = _build_transitions()


def _is_parameter_byte(byte: bytes) -> bool:
    return 0x20 <= byte[0] <= 0x3F


def step(state: str, byte: bytes) -> Step:
    """Advance the parser from ``state`` on ``byte``."""
    found = TRANSITIONS.get((state, byte))
    if found is not None:
        return found
    if state == ESCAPE:
        # Not an introducer: ESC was a key of its own and ``byte`` starts the next one.
        return Step(None, ESC, push_back=True)
    if state == SS3:
        return Step(None, ESC)
    if (state == CSI or state == CSI_PARAMS or state.startswith(CSI_DIGIT_PREFIX)) and _is_parameter_byte(byte):
        return Step(CSI_PARAMS)
    # Final byte of an unknown sequence, or a byte that cannot continue one.
    return Step(None, ESC)
