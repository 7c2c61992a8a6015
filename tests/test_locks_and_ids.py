from __future__ import annotations

import sys
import threading
from pathlib import Path

# Garante que o pacote webplayer seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from webplayer.core import utils  # noqa: E402
from webplayer.core.locks import ReadWriteLock  # noqa: E402


def _in_thread(fn) -> threading.Thread:
    t = threading.Thread(target=fn, daemon=True)
    t.start()
    return t


def test_readers_do_not_block_each_other():
    lock = ReadWriteLock()
    release = threading.Event()
    first_in = threading.Event()
    second_in = threading.Event()

    def _hold():
        with lock.read():
            first_in.set()
            release.wait(5)

    def _second():
        with lock.read():
            second_in.set()

    _in_thread(_hold)
    assert first_in.wait(5)
    _in_thread(_second)
    assert second_in.wait(5)
    release.set()


def test_writer_waits_for_reader():
    lock = ReadWriteLock()
    release = threading.Event()
    reading = threading.Event()
    wrote = threading.Event()

    def _hold():
        with lock.read():
            reading.set()
            release.wait(5)

    def _write():
        with lock.write():
            wrote.set()

    _in_thread(_hold)
    assert reading.wait(5)
    writer = _in_thread(_write)
    assert not wrote.wait(0.2)
    release.set()
    writer.join(5)
    assert wrote.is_set()


def test_reader_waits_for_writer():
    lock = ReadWriteLock()
    release = threading.Event()
    writing = threading.Event()
    read = threading.Event()

    def _hold():
        with lock.write():
            writing.set()
            release.wait(5)

    def _read():
        with lock.read():
            read.set()

    _in_thread(_hold)
    assert writing.wait(5)
    reader = _in_thread(_read)
    assert not read.wait(0.2)
    release.set()
    reader.join(5)
    assert read.is_set()


def test_new_id_is_decimal_and_increasing():
    ids = [utils.new_id() for _ in range(1000)]
    assert all(i.isdigit() for i in ids)
    values = [int(i) for i in ids]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_new_id_unique_when_clock_stalls(monkeypatch):
    monkeypatch.setattr(utils.time, "time_ns", lambda: 1)
    first, second = utils.new_id(), utils.new_id()
    assert first != second
    assert int(second) == int(first) + 1


def test_new_id_unique_across_threads():
    results: list[str] = []
    lock = threading.Lock()

    def _work():
        local = [utils.new_id() for _ in range(200)]
        with lock:
            results.extend(local)

    threads = [threading.Thread(target=_work) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(set(results)) == 1600
