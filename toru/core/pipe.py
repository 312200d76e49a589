"""Pipe — linear composition of stages over a carried value."""

import time

from .. import config


def through(passable, *stages):
    """
    Feed passable through the stages in order. Each stage receives the
    output of the previous one; with no stages, passable comes back as-is.

    The first stage that raises aborts the run and its exception propagates.
    """
    for stage in stages:
        passable = stage(passable)
    return passable


def through_stages(passable, stages):
    """
    Same as through(), with the stages given as any finite iterable.

    The iterable is consumed in full before the first stage runs, so an
    iterable that breaks partway leaves passable untouched.
    """
    return through(passable, *stages)


class Pipe:
    """
    Named stages run one after another. Output of one stage feeds the next,
    and every application is recorded in self.log.

    A Pipe is a stage itself: pipe(x) is pipe.run(x).
    """

    def __init__(self, preview=None, limit=None, verbose=None):
        self.stages = []
        self.log = []
        self.preview = config.LOG_PREVIEW if preview is None else preview
        self.limit = config.LOG_LIMIT if limit is None else limit
        self.verbose = config.VERBOSE if verbose is None else verbose

    def add(self, name, fn):
        """Add a stage. fn: takes input, returns output."""
        self.stages.append((name, fn))
        return self

    def run(self, initial_input):
        """Run the pipeline. Each stage's output feeds the next."""
        return through_stages(
            initial_input,
            (self._recorded(name, fn) for name, fn in self.stages),
        )

    def loop(self, initial_input, iterations=1, delay=0):
        """Run the pipeline in a loop, feeding output back to input."""
        data = initial_input
        for i in range(iterations):
            data = self.run(data)
            if delay > 0:
                time.sleep(delay)
        return data

    def __call__(self, initial_input):
        return self.run(initial_input)

    def __len__(self):
        return len(self.stages)

    def _recorded(self, name, fn):
        def stage(data):
            try:
                out = fn(data)
            except Exception as e:
                self._record({'stage': name, 'error': repr(e)[:self.preview], 'time': time.time()})
                if self.verbose:
                    print(f"stage '{name}' failed: {e}")
                raise
            self._record({'stage': name, 'output': str(out)[:self.preview], 'time': time.time()})
            if self.verbose:
                print(f"stage '{name}' -> {str(out)[:self.preview]}")
            return out
        return stage

    def _record(self, entry):
        self.log.append(entry)
        # oldest first out; a negative limit keeps everything, 0 keeps nothing
        if self.limit >= 0 and len(self.log) > self.limit:
            del self.log[:len(self.log) - self.limit]
