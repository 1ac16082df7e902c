from typing import Any, Callable, Dict, Optional

from tenacity import RetryError, Retrying, retry_if_exception_type, stop_after_attempt

from coreason_aem_client.domain.response import Result
from coreason_aem_client.domain.retry import RetryPolicy
from coreason_aem_client.events import ClientEvent, EventEmitter, EventType, LoguruEmitter
from coreason_aem_client.exceptions import ConvergenceError

StatusCheck = Callable[[], Result]


class NotConverged(Exception):
    """Internal exception to trigger retry in tenacity."""

    def __init__(self, result: Result) -> None:
        super().__init__(result.message)
        self.result = result


def is_converged(result: Result) -> bool:
    return result.is_success() and result.data is True


def converge(
    policy: RetryPolicy,
    check: StatusCheck,
    *,
    label: str = "Status",
    event_emitter: Optional[EventEmitter] = None,
    sleep: Optional[Callable[[float], None]] = None,
) -> Result:
    """
    Calls check until it reports success with True data, backing off between attempts.

    Args:
        policy: Attempt count and backoff bounds.
        check: Status query returning a Result with boolean data.
        label: Name used in progress events, e.g. "Install".
        event_emitter: Receives one CHECK_ATTEMPT event per attempt. Defaults to LoguruEmitter.
        sleep: Replacement for time.sleep between attempts.

    Returns:
        The Result of the converged check.

    Raises:
        ConvergenceError: If the last allowed attempt did not converge. Carries the last check's message.
    """
    emitter = event_emitter or LoguruEmitter()
    retry_kwargs: Dict[str, Any] = {}
    if sleep is not None:
        retry_kwargs["sleep"] = sleep

    try:
        for attempt in Retrying(
            stop=stop_after_attempt(policy.max_tries),
            wait=policy.wait_strategy(),
            retry=retry_if_exception_type(NotConverged),
            reraise=False,
            **retry_kwargs,
        ):
            with attempt:
                attempt_number = attempt.retry_state.attempt_number
                result = check()
                converged = is_converged(result)

                emitter.emit(
                    ClientEvent.for_check(
                        EventType.CHECK_ATTEMPT,
                        f"{label} check #{attempt_number}: {converged} - {result.message}",
                        check=label,
                        attempt=attempt_number,
                        converged=converged,
                    )
                )

                if not converged:
                    raise NotConverged(result)

                emitter.emit(
                    ClientEvent.for_check(EventType.CONVERGED, result.message, check=label, attempts=attempt_number)
                )
                return result

    except RetryError as e:
        last_error = e.last_attempt.exception()
        last_result = last_error.result if isinstance(last_error, NotConverged) else None
        message = last_result.message if last_result else f"{label} check did not converge"
        emitter.emit(ClientEvent.for_check(EventType.EXHAUSTED, message, check=label, attempts=policy.max_tries))
        raise ConvergenceError(message, last_result) from e

    # Unreachable: tenacity either returns from the block or raises RetryError
    raise ConvergenceError(f"{label} check loop exited unexpectedly")  # pragma: no cover
