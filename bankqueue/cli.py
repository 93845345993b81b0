"""Interactive bank queue menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import Optional, Sequence, TextIO

from bankqueue.ticketqueue import QueueEmptyError, QueueFullError, TicketQueue

EXIT_CHOICE = 4


def menu_text() -> str:
    """Return the main menu followed by the prompt."""
    return (
        "\n=========================\n"
        "  SISTEM ANTRIAN BANK\n"
        "=========================\n"
        "1. Ambil Antrian\n"
        "2. Proses Antrian\n"
        "3. Cetak Antrian\n"
        "4. Keluar\n"
        "=========================\n"
        "Pilih menu: "
    )


def _tokens(infile: TextIO) -> Iterator[str]:
    for line in infile:
        yield from line.split()


def _parse_choice(token: str) -> Optional[int]:
    try:
        return int(token)
    except ValueError:
        return None


def run(infile: TextIO, outfile: TextIO) -> None:
    """Serve menu choices read from ``infile`` until the exit choice or end of input."""
    queue = TicketQueue()
    ticket = 0
    tokens = _tokens(infile)

    while True:
        outfile.write(menu_text())
        token = next(tokens, None)
        if token is None:
            outfile.write("\n")
            return
        choice = _parse_choice(token)

        if choice == 1:
            ticket += 1
            try:
                queue.enqueue(ticket)
            except QueueFullError as error:
                outfile.write(f"{error}\n")
            outfile.write(
                f"\nNomor Antrian {ticket} telah ditambahkan ke antrian utama.\n"
            )
            outfile.write("\nAntrian Sekarang: ")
            outfile.write(queue.format() + "\n")
        elif choice == 2:
            try:
                served = queue.dequeue()
            except QueueEmptyError:
                outfile.write("\nTidak ada antrian untuk diproses.\n")
            else:
                outfile.write(
                    f"\nNomor Antrian {served} sedang diproses dan telah dihapus "
                    "dari antrian.\n"
                )
                outfile.write("\nAntrian Sekarang: ")
                outfile.write(queue.format() + "\n")
        elif choice == 3:
            outfile.write("\nAntrian Saat Ini: ")
            outfile.write(queue.format() + "\n")
        elif choice == EXIT_CHOICE:
            outfile.write("\nTerima kasih! Program selesai.\n")
            return
        else:
            outfile.write("\nPilihan tidak valid. Silakan coba lagi.\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the bank queue menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Bank ticket queue system.")
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())