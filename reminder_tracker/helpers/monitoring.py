from contextvars import copy_context
from enum import Enum
from functools import wraps
from os import environ

from opentelemetry import metrics, trace
from opentelemetry.metrics import Counter
from opentelemetry.semconv.attributes import service_attributes
from opentelemetry.trace.span import INVALID_SPAN
from opentelemetry.util.types import Attributes, AttributeValue
from structlog.contextvars import bind_contextvars, get_contextvars

MODULE_NAME = "reminder-tracker"
VERSION = environ.get("VERSION", "0.0.0-unknown")


class SpanAttributeEnum(str, Enum):
    """
    OpenTelemetry attributes.

    These attributes are used to track a reminder in the logs and metrics.
    """

    REMINDER_FREQUENCY = "reminder.frequency"
    """Recurrence frequency (e.g. none, daily, ...)."""
    REMINDER_ID = "reminder.id"
    """Technical reminder identifier."""
    SNOOZE_DAYS = "reminder.snooze_days"
    """Days added to the due date by a snooze."""

    def attribute(
        self,
        value: AttributeValue,
    ) -> None:
        """
        Set an attribute on the current span.
        """
        # Enrich logging
        bind_contextvars(**{self.value: value})

        # Enrich span
        span = trace.get_current_span()
        if span == INVALID_SPAN:
            return
        span.set_attribute(self.value, value)


class SpanMeterEnum(str, Enum):
    REMINDER_ACKNOWLEDGED = "reminder.acknowledged"
    """Recurring reminders moved to their next occurrence."""
    REMINDER_COMPLETED = "reminder.completed"
    """One-off reminders toggled, in either direction."""
    REMINDER_CREATED = "reminder.created"
    """Reminders created."""
    REMINDER_REJECTED = "reminder.rejected"
    """Creation inputs rejected by validation."""
    REMINDER_SNOOZED = "reminder.snoozed"
    """Reminders snoozed."""

    def counter(
        self,
        unit: str,
    ) -> Counter:
        """
        Create a counter metric to track a span counter.
        """
        return meter.create_counter(
            description=self.__doc__ or "",
            name=self.value,
            unit=unit,
        )


# Attributes
_default_attributes = {
    service_attributes.SERVICE_NAME: MODULE_NAME,
    service_attributes.SERVICE_VERSION: VERSION,
}

# Create a tracer and meter that will be used across the application
tracer = trace.get_tracer(
    attributes=_default_attributes,
    instrumenting_module_name=MODULE_NAME,
)
meter = metrics.get_meter(
    name=MODULE_NAME,
)

# Init metrics
reminder_acknowledged = SpanMeterEnum.REMINDER_ACKNOWLEDGED.counter("reminders")
reminder_completed = SpanMeterEnum.REMINDER_COMPLETED.counter("reminders")
reminder_created = SpanMeterEnum.REMINDER_CREATED.counter("reminders")
reminder_rejected = SpanMeterEnum.REMINDER_REJECTED.counter("reminders")
reminder_snoozed = SpanMeterEnum.REMINDER_SNOOZED.counter("reminders")


def counter_add(
    metric: Counter,
    value: float | int,
):
    """
    Add a counter metric value with context attributes.
    """
    metric.add(
        amount=value,
        attributes={
            # First, set default attributes
            **_default_attributes,
            # Then, set context attributes, they can override default attributes
            **get_contextvars(),
        },
    )


def start_as_current_span(
    name: str,
    attributes: Attributes = None,
):
    """
    Decorator to start an OTEL span for the function and set it as the current.

    Function runs in a copy of the current context, attributes it binds to the logs do not leak to later calls.
    """

    def _wrapper(func):
        @wraps(func)
        def _inner(*args, **kwargs):
            # Start a span
            with tracer.start_as_current_span(
                attributes=attributes,
                name=name,
            ):
                # Call the function, in its own context
                return copy_context().run(func, *args, **kwargs)

        return _inner

    return _wrapper
