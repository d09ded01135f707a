"""Delimited hierarchical names

A name is an ordered sequence of masked components joined by a single
delimiter character. `AbstractName` derives rendering, equality, hashing,
cloning and concatenation from six primitives that each store implements:

- `StringArrayName` keeps the components in a list
- `StringName` keeps one delimited string and re-parses it on demand

Examples:
- `StringArrayName(["oss", "cs", "fau", "de"])` renders as `oss.cs.fau.de`
- `StringName("a\\.b#c", "#")` has the components `a\\.b` and `c`
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence as SequenceABC
from typing import Iterator, List, Optional, Sequence

from .contracts import (
    check_state,
    ensure,
    mutator,
    require,
    require_index,
)
from .escaping import (
    DEFAULT_DELIMITER,
    ESCAPE_CHARACTER,
    has_dangling_escape,
    has_unmasked_delimiter,
    is_valid_delimiter,
    join,
    mask,
    split,
    to_data_component,
    unmask,
)


_HASH_MULTIPLIER = 31
_HASH_MASK = 0xFFFFFFFF


class AbstractName(ABC):
    """Behavior shared by every component store

    Subclasses provide `get_no_components`, `get_component`,
    `set_component`, `insert`, `append`, `remove` and `_copy`. Everything
    else is built on top of those.
    """

    def __init__(self, delimiter: str = DEFAULT_DELIMITER):
        self._require_valid_delimiter(delimiter)
        self._delimiter = delimiter

    @staticmethod
    def _require_valid_delimiter(delimiter: object) -> None:
        require(
            is_valid_delimiter(delimiter),
            f"Delimiter must be a single character other than "
            f"'{ESCAPE_CHARACTER}', got {delimiter!r}",
        )

    def _require_valid_component(self, c: object) -> None:
        require(isinstance(c, str), f"Component must be a string, got {c!r}")
        require(
            not has_unmasked_delimiter(c, self._delimiter),
            f"Component {c!r} contains an unmasked '{self._delimiter}'",
        )
        require(
            not has_dangling_escape(c),
            f"Component {c!r} ends in an unpaired '{ESCAPE_CHARACTER}'",
        )

    def _assert_invariant(self) -> None:
        check_state(
            is_valid_delimiter(self._delimiter),
            f"Invalid internal delimiter {self._delimiter!r}",
        )

    # Primitives

    @abstractmethod
    def get_no_components(self) -> int:
        ...

    @abstractmethod
    def get_component(self, i: int) -> str:
        """Get the masked component at index i"""

    @abstractmethod
    def set_component(self, i: int, c: str) -> None:
        ...

    @abstractmethod
    def insert(self, i: int, c: str) -> None:
        """Insert masked component c before index i (i may equal the count)"""

    @abstractmethod
    def append(self, c: str) -> None:
        ...

    @abstractmethod
    def remove(self, i: int) -> None:
        ...

    @abstractmethod
    def _copy(self) -> "AbstractName":
        """Independent instance with the same delimiter and components"""

    # Derived operations

    def get_delimiter_character(self) -> str:
        return self._delimiter

    def is_empty(self) -> bool:
        return self.get_no_components() == 0

    def as_string(self, delimiter: Optional[str] = None) -> str:
        """Human-readable form

        Masking is removed relative to this name's own delimiter, then the
        components are joined with `delimiter` (default: own delimiter).
        The result is for display and is not re-parseable in general.
        """
        if delimiter is None:
            delimiter = self._delimiter
        self._require_valid_delimiter(delimiter)
        return join([unmask(c, self._delimiter) for c in self], delimiter)

    def as_data_string(self) -> str:
        """Canonical machine-readable form

        Every component is re-masked against the default delimiter and the
        components are joined with it, whatever this name's delimiter is.
        """
        return join(
            [to_data_component(c, self._delimiter) for c in self],
            DEFAULT_DELIMITER,
        )

    def is_equal(self, other: object) -> bool:
        """Structural equality against anything exposing the read primitives

        Same count, same delimiter and pairwise identical masked
        components. Never raises for foreign objects.
        """
        if other is None:
            return False
        for attr in ("get_no_components", "get_component", "get_delimiter_character"):
            if not callable(getattr(other, attr, None)):
                return False

        count = self.get_no_components()
        if count != other.get_no_components():  # type: ignore[attr-defined]
            return False
        if self.get_delimiter_character() != other.get_delimiter_character():  # type: ignore[attr-defined]
            return False
        for i in range(count):
            if self.get_component(i) != other.get_component(i):  # type: ignore[attr-defined]
                return False
        return True

    def get_hash_code(self) -> int:
        """Polynomial hash of the data string, as a signed 32-bit integer

        Names that are `is_equal` have the same hash code. Names are
        mutable, so the value changes with the components and `hash()`
        is not supported.
        """
        value = 0
        for c in self.as_data_string():
            value = (value * _HASH_MULTIPLIER + ord(c)) & _HASH_MASK
        if value & 0x80000000:
            value -= 0x100000000
        return value

    def clone(self) -> "AbstractName":
        result = self._copy()
        ensure(self.is_equal(result), "Clone must be equal to original")
        return result

    def concat(self, other: "AbstractName") -> None:
        """Append every component of other, in order

        Components of a name with a different delimiter are re-masked for
        this name's delimiter.
        """
        require(other is not None, "Cannot concatenate None")

        old_count = self.get_no_components()
        other_count = other.get_no_components()
        other_delimiter = other.get_delimiter_character()

        for i in range(other_count):
            c = other.get_component(i)
            if other_delimiter != self._delimiter:
                c = mask(unmask(c, other_delimiter), self._delimiter)
            self.append(c)

        ensure(
            self.get_no_components() == old_count + other_count,
            "Concat failed: component count did not increase correctly",
        )
        self._assert_invariant()

    def __len__(self) -> int:
        return self.get_no_components()

    def __iter__(self) -> Iterator[str]:
        for i in range(self.get_no_components()):
            yield self.get_component(i)

    def __str__(self) -> str:
        return self.as_data_string()

    def __eq__(self, other: object) -> bool:
        return self.is_equal(other)

    # Mutable, so not usable as a set member or dict key; see get_hash_code
    __hash__ = None  # type: ignore[assignment]


class StringArrayName(AbstractName):
    """A name backed by a list of masked components

    Examples:
    - `StringArrayName(["a", "b"])` renders as `a.b`
    - `StringArrayName([])` is empty
    """

    def __init__(self, source: Sequence[str], delimiter: str = DEFAULT_DELIMITER):
        super().__init__(delimiter)

        require(source is not None, "Source cannot be None")
        require(
            isinstance(source, SequenceABC) and not isinstance(source, str),
            f"Source must be a sequence of components, got {type(source).__name__}",
        )
        for c in source:
            self._require_valid_component(c)

        self._components: List[str] = list(source)
        self._assert_invariant()

    def _assert_invariant(self) -> None:
        super()._assert_invariant()
        check_state(isinstance(self._components, list), "Internal component list is missing")

    def _copy(self) -> "StringArrayName":
        return StringArrayName(self._components, self._delimiter)

    def get_no_components(self) -> int:
        return len(self._components)

    def get_component(self, i: int) -> str:
        require_index(i, 0, len(self._components) - 1)
        return self._components[i]

    @mutator(delta=0)
    def set_component(self, i: int, c: str) -> None:
        require_index(i, 0, len(self._components) - 1)
        self._require_valid_component(c)
        self._components[i] = c

    @mutator(delta=1)
    def insert(self, i: int, c: str) -> None:
        require_index(i, 0, len(self._components))
        self._require_valid_component(c)
        self._components.insert(i, c)

    @mutator(delta=1)
    def append(self, c: str) -> None:
        self._require_valid_component(c)
        self._components.append(c)

    @mutator(delta=-1)
    def remove(self, i: int) -> None:
        require_index(i, 0, len(self._components) - 1)
        del self._components[i]

    def __repr__(self) -> str:
        return f"StringArrayName({self._components!r}, {self._delimiter!r})"


class StringName(AbstractName):
    """A name backed by a single masked, delimited string

    The component count is cached and reconciled against a fresh parse
    after every mutation. An empty source is one empty component; a name
    whose last component was removed has an empty string and a count of
    zero.
    """

    def __init__(self, source: str, delimiter: str = DEFAULT_DELIMITER):
        super().__init__(delimiter)

        require(isinstance(source, str), f"Source must be a string, got {source!r}")
        require(
            not has_dangling_escape(source),
            f"Source {source!r} ends in an unpaired '{ESCAPE_CHARACTER}'",
        )

        self._name = source
        self._no_components = len(split(source, delimiter))
        self._assert_invariant()

    def _split(self) -> List[str]:
        return split(self._name, self._delimiter)

    def _assert_invariant(self) -> None:
        super()._assert_invariant()
        parsed = len(self._split())

        # Emptied name: "" parses to one component but holds none
        if self._no_components == 0 and self._name == "":
            return

        check_state(
            self._no_components == parsed,
            f"Internal state mismatch: counter says {self._no_components}, "
            f"but parsing yields {parsed}",
        )

    def _copy(self) -> "StringName":
        result = StringName(self._name, self._delimiter)
        result._no_components = self._no_components
        result._assert_invariant()
        return result

    def get_no_components(self) -> int:
        return self._no_components

    def get_component(self, i: int) -> str:
        require_index(i, 0, self._no_components - 1)
        return self._split()[i]

    @mutator(delta=0)
    def set_component(self, i: int, c: str) -> None:
        require_index(i, 0, self._no_components - 1)
        self._require_valid_component(c)

        components = self._split()
        components[i] = c
        self._name = join(components, self._delimiter)

    @mutator(delta=1)
    def insert(self, i: int, c: str) -> None:
        require_index(i, 0, self._no_components)
        self._require_valid_component(c)

        components = self._split()
        if self._no_components == 0:
            # Overwrite the placeholder left by parsing ""
            components[i:i + 1] = [c]
        else:
            components.insert(i, c)
        self._name = join(components, self._delimiter)
        self._no_components += 1

    @mutator(delta=1)
    def append(self, c: str) -> None:
        self._require_valid_component(c)

        if self._no_components == 0:
            self._name = c
        else:
            self._name += self._delimiter + c
        self._no_components += 1

    @mutator(delta=-1)
    def remove(self, i: int) -> None:
        require_index(i, 0, self._no_components - 1)

        components = self._split()
        del components[i]
        self._name = join(components, self._delimiter)
        self._no_components -= 1

    def __repr__(self) -> str:
        return f"StringName({self._name!r}, {self._delimiter!r})"
