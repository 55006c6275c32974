import threading
from enum import Enum


class LoopState(Enum):
    IDLE = 'idle'
    RUNNING = 'running'
    SHUTTING_DOWN = 'shutting_down'
    TERMINATED = 'terminated'


class CancellationToken:
    """Shutdown request shared between the publish loop and whoever stops it."""
    def __init__(self):
        self._event = threading.Event()

    def cancel(self):
        self._event.set()

    @property
    def cancelled(self):
        return self._event.is_set()


class PublishLoop:
    """
    Publishes a fixed velocity command once per period.

    publish and sleep are supplied by the caller (a rclpy publisher and rate
    when running for real), so the loop itself never touches the middleware.
    """
    def __init__(self, publish, logger, command):
        self.publish = publish
        self.logger = logger
        self.command = command
        self.state = LoopState.IDLE

    def start(self):
        if self.state != LoopState.IDLE:
            raise RuntimeError(f'cannot start publish loop in state {self.state.value}')
        self.state = LoopState.RUNNING

    def run(self, keep_running, sleep):
        """
        Publish until keep_running() returns False, polled once per period.

        Returns the number of commands sent.
        """
        if self.state != LoopState.RUNNING:
            raise RuntimeError(f'publish loop is not running (state {self.state.value})')

        count = 0
        while keep_running():
            self.logger.info(
                f'Sending velocity command: {{{self.command.linear_speed:f}, {self.command.angular_rate:f}}}')
            self.publish(self.command)
            count += 1
            sleep()

        self.state = LoopState.SHUTTING_DOWN
        return count

    def stop(self, *release_steps):
        """
        Release the middleware resources and terminate. Safe to call twice.

        Each release step runs even if an earlier one failed; failures are
        logged and never raised, so shutdown always completes.
        """
        if self.state == LoopState.TERMINATED:
            return
        self.state = LoopState.SHUTTING_DOWN
        for step in release_steps:
            try:
                step()
            except Exception as e:
                self.logger.warn(f'Shutdown step {getattr(step, "__name__", step)} failed: {e}')
        self.state = LoopState.TERMINATED
