"""
Try: capturing failures, recovering and exchanging strategies.

Run: python examples/try_recovery.py
"""
import json

from monadpy import Try, ConsoleLogger, set_logger


def load(text: str) -> Try[dict]:
    return Try.of(lambda: json.loads(text))


def main():
    # Surface every captured failure on stderr
    set_logger(ConsoleLogger(level="DEBUG"))

    ok = load('{"retries": 3}').map(lambda cfg: cfg["retries"])
    print("ok =>", ok)                                      # Success(value=3)

    missing = load('{}').map(lambda cfg: cfg["retries"])
    print("missing =>", missing.recover_when(lambda e: isinstance(e, KeyError), lambda e: 1))

    broken = (
        load("{not json")
        .exchange_when(lambda e: isinstance(e, ValueError), lambda e: load('{"retries": 0}'))
        .map(lambda cfg: cfg["retries"])
    )
    print("broken =>", broken.to_either())                  # Right(value=0)

    print("optional =>", Try.of_runnable(lambda: None).to_optional())  # NONE


if __name__ == "__main__":
    main()
