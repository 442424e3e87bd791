import io
import time

from trashsim.alert import Alert, ExclamationAlert, WarningAlert


def _wait_for(predicate, timeout=3.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


def test_alert_keeps_tone():
    alert = Alert(440, 120, stream=io.StringIO())
    try:
        assert (alert.frequency, alert.duration) == (440, 120)
    finally:
        alert.shutdown()


def test_alert_period_is_half_a_second():
    alert = Alert(440, 120, stream=io.StringIO())
    try:
        assert alert.interval_ms == 500
    finally:
        alert.shutdown()


def test_exclamation_tone():
    alert = ExclamationAlert(stream=io.StringIO())
    try:
        assert (alert.frequency, alert.duration) == (1500, 350)
    finally:
        alert.shutdown()


def test_warning_tone():
    alert = WarningAlert(stream=io.StringIO())
    try:
        assert (alert.frequency, alert.duration) == (2500, 350)
    finally:
        alert.shutdown()


def test_alert_rings_bell():
    buffer = io.StringIO()
    alert = WarningAlert(stream=buffer)
    try:
        assert _wait_for(lambda: buffer.getvalue() != "")
    finally:
        alert.shutdown()
    assert set(buffer.getvalue()) == {"\a"}


def test_alert_silent_after_shutdown():
    buffer = io.StringIO()
    alert = ExclamationAlert(stream=buffer)
    alert.shutdown()
    time.sleep(0.6)
    assert buffer.getvalue() == ""