"""
Talker Configuration

Positional arguments: [name] [frequency_hz]

A bad frequency is reported as a fatal diagnostic and turned into a
shutdown request on the context; nothing is raised.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

DEFAULT_NAME = 'Saumil'
DEFAULT_FREQUENCY_HZ = 10


@dataclass(frozen=True)
class Config:
    name: str = DEFAULT_NAME
    frequency_hz: int = DEFAULT_FREQUENCY_HZ
    valid: bool = True


def parse_frequency(text: str) -> Optional[int]:
    """
    Return the frequency as a positive int, or None if unusable.

    Only plain ASCII digits are accepted, and the value must fit in a
    float so the tick period can be computed.
    """
    if not isinstance(text, str):
        return None
    text = text.strip()
    if not (text.isascii() and text.isdigit()):
        return None
    try:
        value = int(text)
        float(value)
    except (ValueError, OverflowError):
        return None
    if value <= 0:
        return None
    return value


def configure(argv: Sequence[str], context) -> Config:
    """Resolve name and frequency from the non-ROS command-line arguments."""
    log = context.diagnostics
    args = list(argv)

    if not args:
        log.warn('You have passed no arguments. Will have to set default values.')
        config = Config()

    elif len(args) == 1:
        log.debug('1 argument passed')
        log.warn('You have not specified frequency. Default frequency will be taken.')
        config = Config(name=args[0])

    else:
        if len(args) > 2:
            log.warn(f'Ignoring extra arguments: {" ".join(args[2:])}')
        log.debug('2 arguments passed')

        frequency = parse_frequency(args[1])
        if frequency is None:
            log.fatal('Passed argument of frequency cannot work')
            context.request_shutdown()
            return Config(name=args[0], valid=False)

        config = Config(name=args[0], frequency_hz=frequency)

    log.info(f'Setting name {config.name}')
    log.info(f'Setting frequency {config.frequency_hz}')
    return config
