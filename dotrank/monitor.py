import os
import threading
import time

import psutil

MEM_SAMPLE_INTERVAL = 0.01


class RunProfile:
    """
    Profile one CLI run: wall time plus resident memory of this process.

    Used as a context manager. On entry it records the baseline RSS and starts
    a daemon sampler thread; on exit the sampler is stopped and joined so the
    figures are final before ``report()`` is read.
    """

    def __init__(self, interval=MEM_SAMPLE_INTERVAL):
        self.interval = interval
        self.base_rss = 0
        self.peak_rss = 0
        self.elapsed = 0.0
        self._proc = psutil.Process(os.getpid())
        self._done = threading.Event()
        self._sampler = threading.Thread(target=self._sample, daemon=True)
        self._t0 = None

    def _sample(self):
        # Event.wait doubles as the sampling sleep so exit does not wait a full interval
        while not self._done.wait(self.interval):
            try:
                rss = self._proc.memory_info().rss
            except psutil.Error:
                return
            if rss > self.peak_rss:
                self.peak_rss = rss

    def __enter__(self):
        self.base_rss = self.peak_rss = self._proc.memory_info().rss
        self._t0 = time.time()
        self._sampler.start()
        return self

    def __exit__(self, *exc):
        self._done.set()
        self._sampler.join()
        self.elapsed = time.time() - self._t0
        self.peak_rss = max(self.peak_rss, self._proc.memory_info().rss)
        return False

    def report(self):
        mb = 1024 * 1024
        return [
            f"Total elapsed time: {self.elapsed:.2f}s",
            f"Peak memory: {self.peak_rss / mb:.2f} MB (+{(self.peak_rss - self.base_rss) / mb:.2f} MB during run)",
        ]
