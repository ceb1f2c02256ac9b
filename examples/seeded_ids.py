"""Reproducible IDs from a seeded random source, fixed clock and fixed fingerprint."""

from cuidkit import Counter, Cuid, SeededRandomSource


def main() -> None:
    cuid = Cuid(
        random_source=SeededRandomSource(2024),
        counter=Counter(0),
        fingerprint="0" * 32,
        clock=lambda: 1_700_000_000_000_000_000,
    )
    for _ in range(5):
        print(cuid.generate())


if __name__ == "__main__":
    main()
