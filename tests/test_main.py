from __future__ import annotations

import json

from blockfall.__main__ import main


def test_main_prints_piece_and_frame(capsys) -> None:
    main(["--seed", "3"])
    lines = capsys.readouterr().out.splitlines()

    piece = json.loads(lines[0])
    assert (piece["x"], piece["y"]) == (4, 0)

    frame = lines[1:]
    assert len(frame) == 20
    assert all(len(row) == 10 for row in frame)
    assert sum(row.count("#") for row in frame) == 4
    assert "x" not in "".join(frame)


def test_main_seed_is_reproducible(capsys) -> None:
    main(["--seed", "11"])
    first = capsys.readouterr().out
    main(["--seed", "11"])
    assert capsys.readouterr().out == first
