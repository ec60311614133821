import threading

from xenochat.telemetry import RuntimeMetrics, RuntimeSnapshot


def test_fresh_metrics_are_zero():
    assert RuntimeMetrics().snapshot() == RuntimeSnapshot()


def test_counters_are_independent():
    metrics = RuntimeMetrics()
    inbound, outbound, dropped = 5, 3, 2
    for _ in range(inbound):
        metrics.increment_inbound()
    for _ in range(outbound):
        metrics.increment_outbound()
    for _ in range(dropped):
        metrics.increment_dropped()
    assert metrics.snapshot() == RuntimeSnapshot(inbound, outbound, dropped)


def test_snapshot_does_not_change_after_more_increments():
    metrics = RuntimeMetrics()
    metrics.increment_inbound()
    before = metrics.snapshot()
    metrics.increment_inbound()
    after = metrics.snapshot()
    assert after.messages_inbound == before.messages_inbound + 1


def test_concurrent_increments_are_not_lost():
    metrics = RuntimeMetrics()
    threads_count, per_thread = 8, 1000

    def work():
        for _ in range(per_thread):
            metrics.increment_inbound()
            metrics.increment_dropped()

    threads = [threading.Thread(target=work) for _ in range(threads_count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    snapshot = metrics.snapshot()
    assert snapshot.messages_inbound == threads_count * per_thread
    assert snapshot.dropped_messages == threads_count * per_thread
    assert snapshot.messages_outbound == RuntimeSnapshot().messages_outbound