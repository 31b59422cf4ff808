"""Test Beans: bean-style classes shared by the outline tests.

Every accessor of TestBeanClass bumps INVOCATIONS so tests can prove that
member references never run real bean code.
"""

from typing import Optional

from beanoutline.core.domain_types import Byte, Char, Double, Float, Int, Long, Short


class Invocations:
    """Shared side-effect counter."""

    def __init__(self):
        self.count = 0

    def reset(self):
        self.count = 0


INVOCATIONS = Invocations()


class TestBeanClass:
    __test__ = False

    def __init__(self):
        self._read_write_property = None

    def getReadWriteProperty(self) -> str:
        INVOCATIONS.count += 1
        return self._read_write_property

    def isBooleanProperty(self) -> bool:
        INVOCATIONS.count += 1
        return False

    def getReadOnlyProperty(self) -> str:
        INVOCATIONS.count += 1
        return ""

    def setReadWriteProperty(self, value: str) -> None:
        INVOCATIONS.count += 1
        self._read_write_property = value

    def nonPropertyMethod(self) -> None:
        INVOCATIONS.count += 1

    def getClass(self) -> type:
        INVOCATIONS.count += 1
        return type(self)


class TestBeanClassWithVariousProperties:
    __test__ = False

    def __init__(self):
        self._boolean = False
        self._byte = 0
        self._char = "\0"
        self._short = 0
        self._int = 0
        self._long = 0
        self._float = 0.0
        self._double = 0.0
        self._string = None

    def isBooleanProperty(self) -> bool:
        return self._boolean

    def getByteProperty(self) -> Byte:
        return self._byte

    def getCharProperty(self) -> Char:
        return self._char

    def getShortProperty(self) -> Short:
        return self._short

    def getIntProperty(self) -> Int:
        return self._int

    def getLongProperty(self) -> Long:
        return self._long

    def getFloatProperty(self) -> Float:
        return self._float

    def getDoubleProperty(self) -> Double:
        return self._double

    def getStringProperty(self) -> str:
        return self._string

    def setBooleanProperty(self, value: bool) -> None:
        self._boolean = value

    def setByteProperty(self, value: Byte) -> None:
        self._byte = value

    def setCharProperty(self, value: Char) -> None:
        self._char = value

    def setShortProperty(self, value: Short) -> None:
        self._short = value

    def setIntProperty(self, value: Int) -> None:
        self._int = value

    def setLongProperty(self, value: Long) -> None:
        self._long = value

    def setFloatProperty(self, value: Float) -> None:
        self._float = value

    def setDoubleProperty(self, value: Double) -> None:
        self._double = value

    def setStringProperty(self, value: str) -> None:
        self._string = value


class SnakeAccessorBean:
    """Python-style accessor spelling plus static/class methods."""

    def __init__(self):
        self._first_name = ""
        self._nickname = None
        self._count = 0

    def get_first_name(self) -> str:
        return self._first_name

    def set_first_name(self, value: str) -> None:
        self._first_name = value

    def is_active(self) -> bool:
        return True

    def getNickname(self) -> Optional[str]:
        return self._nickname

    def setNickname(self, value: Optional[str]) -> None:
        self._nickname = value

    def getCount(self):
        return self._count

    def setCount(self, value: int) -> None:
        self._count = value

    def getaway(self) -> str:
        return "not a getter"

    def get_with_argument(self, key: str) -> str:
        return key

    def set_many(self, *values) -> None:
        pass

    @staticmethod
    def getFactory() -> str:
        return "static"

    @classmethod
    def create(cls) -> "SnakeAccessorBean":
        return cls()


class ChildBean(TestBeanClass):
    __test__ = False

    def getReadOnlyProperty(self) -> str:
        return "child"

    def getExtra(self) -> int:
        return 7


class ConflictingTypesBean:
    def getValue(self) -> int:
        return 1

    def setValue(self, value: str) -> None:
        pass


class WideningTypesBean:
    def getValue(self) -> Optional[int]:
        return None

    def setValue(self, value: int) -> None:
        pass


class DuplicateGetterBean:
    def getName(self) -> str:
        return "a"

    def get_name(self) -> str:
        return "b"


class WriteOnlyBean:
    def __init__(self):
        self.secret = None

    def setSecret(self, value: str) -> None:
        self.secret = value


class EmptyBean:
    pass


class Box:
    def getWidth(self) -> int:
        return 1
