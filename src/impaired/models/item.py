"""Item data class."""

# Impaired
# Copyright (C) 2025  Impaired developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass
from typing import Generic

from impaired.type_hints import T


@dataclass(frozen=True, order=True)
class Item(Generic[T]):
    """An item for use in pairwise comparisons.

    Equality, ordering and hashing are those of the wrapped value, so two
    items wrapping equal values are the same item.

    Attributes
    ----------
    value : hashable
        The caller-supplied value, e.g. the name of a programming language.

    Examples
    --------
    >>> Item("Rust") == Item("Rust")
    True
    >>> str(Item("Rust"))
    'Rust'
    """

    value: T

    def __str__(self) -> str:
        return str(self.value)
