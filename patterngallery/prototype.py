"""Splitters that make new splitters by cloning themselves."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod


class Splitter(ABC):
    """Splits a file; new splitters are made by cloning an existing one."""

    @abstractmethod
    def split(self) -> str:
        """Split the file and describe what was done."""

    def clone(self) -> Splitter:
        """Return an independent copy of this splitter."""
        return copy.deepcopy(self)


class BinarySplitter(Splitter):
    def split(self) -> str:
        return "Splitting binary file"


class TxtSplitter(Splitter):
    def split(self) -> str:
        return "Splitting text file"


class PictureSplitter(Splitter):
    def split(self) -> str:
        return "Splitting picture file"


class VideoSplitter(Splitter):
    def split(self) -> str:
        return "Splitting video file"