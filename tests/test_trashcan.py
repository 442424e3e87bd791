import re
import threading

import pytest

from trashsim.garbage import DomesticWaste, Garbage, PaperWaste
from trashsim.trashcan import Trashcan


def _number(can):
    return int(re.fullmatch(r"TrashCan\((\d{3,})\)", can.identifier).group(1))


def test_identifier_format_and_capacity():
    can = Trashcan(200.0)
    assert re.fullmatch(r"TrashCan\(\d{3,}\)", can.identifier)
    assert can.capacity == 200.0


def test_identifiers_count_up():
    first = Trashcan(1.0)
    second = Trashcan(1.0)
    assert _number(second) == _number(first) + 1


@pytest.mark.parametrize("capacity", [0.0, -5.0])
def test_non_positive_capacity_rejected(capacity):
    with pytest.raises(ValueError):
        Trashcan(capacity)


def test_drop_and_weight():
    can = Trashcan(10.0)
    a, b = DomesticWaste(1.5), PaperWaste(2.5)
    can.drop(a)
    can.drop(b)
    assert len(can) == 2
    assert can[0] is a
    assert can[1] is b
    assert can.total_weight() == 4.0
    assert list(can) == [a, b]


def test_empty_removes_everything():
    can = Trashcan(10.0)
    can.drop(Garbage(3.0))
    can.drop(Garbage(4.0))
    can.empty()
    assert len(can) == 0
    assert can.total_weight() == 0.0


def test_concurrent_drops_with_lock():
    can = Trashcan(1000.0, lock=threading.RLock())

    def worker():
        for _ in range(200):
            can.drop(Garbage(1.0))

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(can) == 800
    with can.locked():
        assert can.total_weight() == 800.0