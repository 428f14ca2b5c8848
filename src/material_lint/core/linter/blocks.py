"""
Block-state trackers shared by the line scanners.

Each tracker is a small state record that is fed one line at a time and
reports the transition that line caused. Rules create fresh trackers per
scan, so no state survives between documents.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .syntax import Fence, has_tab_indent, is_blank, leading_spaces, match_admonition, match_fence

ADMONITION_CONTENT_INDENT = 4


class Transition(Enum):
    """What a line did to a tracker's state."""
    NONE = "none"
    OPENED = "opened"
    CLOSED = "closed"


@dataclass
class FenceTracker:
    """
    Toggle-style fenced code tracking.

    A fence line opens a block when outside one. While inside, any fence
    made of the same character and at least as long closes it, even if it
    carries an info string; reporting that mistake is left to the
    code-block-syntax rule.
    """
    fence: Optional[Fence] = None
    start_line: Optional[int] = None

    @property
    def inside(self) -> bool:
        return self.fence is not None

    @property
    def language(self) -> Optional[str]:
        return self.fence.language if self.fence else None

    def feed(self, line: str, line_number: int = 0) -> Transition:
        fence = match_fence(line)
        if fence is None:
            return Transition.NONE

        if self.fence is None:
            self.fence = fence
            self.start_line = line_number
            return Transition.OPENED

        if fence.marker[0] == self.fence.marker[0] and len(fence.marker) >= len(self.fence.marker):
            self.fence = None
            self.start_line = None
            return Transition.CLOSED

        return Transition.NONE


@dataclass
class AdmonitionFrame:
    indent: int
    start_line: int
    kind: str

    @property
    def content_indent(self) -> int:
        return self.indent + ADMONITION_CONTENT_INDENT


@dataclass
class AdmonitionTracker:
    """
    Stack of open admonitions.

    Blank lines never close an admonition. A non-blank line indented less
    than the innermost admonition's content indent closes it (repeatedly,
    for nested admonitions), unless its leading whitespace contains a tab:
    such lines are treated as badly indented content.
    """
    stack: list[AdmonitionFrame] = field(default_factory=list)

    @property
    def inside(self) -> bool:
        return bool(self.stack)

    @property
    def depth(self) -> int:
        return len(self.stack)

    @property
    def current(self) -> Optional[AdmonitionFrame]:
        return self.stack[-1] if self.stack else None

    def feed(self, line: str, line_number: int = 0) -> Transition:
        closed = False

        if not is_blank(line) and not has_tab_indent(line):
            indent = leading_spaces(line)
            while self.stack and indent < self.stack[-1].content_indent:
                self.stack.pop()
                closed = True

        marker = match_admonition(line)
        if marker is not None and (not self.stack or marker.indent >= self.stack[-1].content_indent):
            self.stack.append(AdmonitionFrame(marker.indent, line_number, marker.kind))
            return Transition.OPENED

        return Transition.CLOSED if closed else Transition.NONE
