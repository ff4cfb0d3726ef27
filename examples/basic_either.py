"""
Basic either: branching, right-biased composition and folding.

Run: python examples/basic_either.py
"""
from monadpy import Either, left, right


def parse_port(raw: str) -> Either[str, int]:
    if not raw.isdigit():
        return left(f"not a number: {raw!r}")
    port = int(raw)
    if not 0 < port < 65536:
        return left(f"out of range: {port}")
    return right(port)


def main():
    for raw in ("8080", "http", "70000"):
        described = (
            parse_port(raw)
            .map(lambda p: p + 1)
            .flat_map(lambda p: right(p) if p != 8081 else left("reserved"))
            .fold(lambda err: f"error: {err}", lambda p: f"port: {p}")
        )
        print(raw, "=>", described)

    # Left side processing stays available when both branches matter
    print(parse_port("x").map_left(str.upper).swap().get())   # NOT A NUMBER: 'X'
    print(parse_port("22").or_else_map(lambda err: -1))       # 22


if __name__ == "__main__":
    main()
