"""
Basic containers: Maybe, Either and SyncEffect composed into one pipeline.

Run: python examples/basic_containers.py
"""
import io
import json

from lambdafx import (
    Maybe,
    Success,
    Failure,
    SyncEffect,
    Either,
    ConsoleLogger,
    either,
    maybe_to_either,
    validate_eithers,
    spy,
)


def read_body():
    return json.loads('{"queryResult": {"queryText": "LongPa$$word"}}')


def long_enough(password):
    return Success(password) if len(password) >= 6 else Failure("Password must have more than 6 characters.")


def has_special(password):
    return Success(password) if any(not c.isalnum() for c in password) else Failure("Password must contain special characters.")


def main():
    log = ConsoleLogger("example", level="DEBUG", stream=io.StringIO())

    # Nothing runs until trigger
    body = SyncEffect.of(read_body).map(spy(log))

    # Optional fields become Maybe, then Either once absence is an error
    query = (
        Either.attempt(body.trigger)
        .flat_map(lambda b: maybe_to_either(Maybe.of(b.get("queryResult")).flat_map(lambda q: Maybe.of(q.get("queryText")))))
        .flat_map(validate_eithers(long_enough, has_special))
    )

    print(either(lambda errors: f"invalid: {errors}", lambda pw: f"valid: {pw}", query))
    print(validate_eithers(long_enough, has_special)("Pass").inspect())


if __name__ == "__main__":
    main()
