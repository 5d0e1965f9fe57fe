from bilete.services.scanner import ScannerSession, ScannerState


def test_lifecycle():
    s = ScannerSession()
    assert s.state == ScannerState.idle
    assert s.start()
    assert not s.start()
    assert s.active
    assert s.stop()
    assert not s.stop()
    assert s.state == ScannerState.idle


def test_detect_requires_active_scanner():
    s = ScannerSession()
    assert not s.detect("TICKET-1", now_ms=0)


def test_duplicate_within_window_is_ignored():
    s = ScannerSession(debounce_ms=2000)
    s.start()
    assert s.detect("TICKET-1", now_ms=1000)
    assert not s.detect("TICKET-1", now_ms=2500)
    assert s.detect("TICKET-1", now_ms=3000)


def test_different_code_passes_immediately():
    s = ScannerSession()
    s.start()
    assert s.detect("A", now_ms=0)
    assert s.detect("B", now_ms=10)
    assert s.detect("A", now_ms=20)


def test_blank_codes_ignored():
    s = ScannerSession()
    s.start()
    assert not s.detect("   ", now_ms=0)
    assert not s.detect(None, now_ms=0)


def test_restart_forgets_last_code():
    s = ScannerSession()
    s.start()
    assert s.detect("A", now_ms=100)
    s.stop()
    s.start()
    assert s.detect("A", now_ms=200)


def test_injected_clock():
    now = [5000]
    s = ScannerSession(clock=lambda: now[0])
    s.start()
    assert s.detect("A")
    now[0] += 1999
    assert not s.detect("A")
    now[0] += 1
    assert s.detect("A")


def test_default_debounce_comes_from_settings(monkeypatch):
    from bilete.core.config import settings
    monkeypatch.setattr(settings, "scan_debounce_ms", 500)
    s = ScannerSession()
    assert s.debounce_ms == 500
    s.start()
    assert s.detect("A", now_ms=0)
    assert not s.detect("A", now_ms=499)
    assert s.detect("A", now_ms=500)


def test_explicit_debounce_wins_over_settings(monkeypatch):
    from bilete.core.config import settings
    monkeypatch.setattr(settings, "scan_debounce_ms", 500)
    assert ScannerSession(debounce_ms=100).debounce_ms == 100
