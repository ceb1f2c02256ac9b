"""Minimal cuidkit hello world printing a few identifiers."""

from cuidkit import Cuid, generate, is_cuid


def main() -> None:
    print(generate())
    print(generate(length=10))

    make_id = Cuid(length=32)
    for _ in range(3):
        value = make_id()
        print(f"{value} valid={is_cuid(value)}")


if __name__ == "__main__":
    main()
