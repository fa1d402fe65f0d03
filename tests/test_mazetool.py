import csv

from mazegen.grid import Grid
from mazegen.mapgen.generator import generate_grid
from mazegen.tiles import Tile
from tools.mazetool import main

ARGS = ["--seed", "42", "--width", "21", "--height", "15", "--enemies", "3"]

def test_dump_to_stdout(capsys):
    main(["dump", *ARGS, "--stats"])
    out = capsys.readouterr().out.splitlines()
    want = generate_grid(42, width=21, height=15, enemy_count=3)
    assert "\n".join(out[:15]) == want.dump()
    assert out[15].startswith("wall=")
    stats = out[15].split()
    assert "player=1" in stats
    assert f"enemy={want.count(Tile.ENEMY)}" in stats
    x, y = want.first(Tile.PLAYER)
    assert f"start={x},{y}" in stats
    assert any(s.startswith("regions=") for s in stats)

def test_dump_round_odd(tmp_path):
    out = tmp_path / "d.txt"
    main(["dump", "--seed", "3", "--width", "20", "--height", "14", "--round-odd", "--out", str(out)])
    g = Grid.from_dump(out.read_text(encoding="utf-8"))
    assert (g.width, g.height) == (21, 15)

def test_emit_tsv(tmp_path):
    out = tmp_path / "level.tsv"
    main(["emit", *ARGS, "--keep-dead-ends", "--out", str(out)])
    with open(out, newline="") as f:
        rows = list(csv.reader(f, delimiter="\t"))
    want = generate_grid(42, width=21, height=15, enemy_count=3, remove_dead_ends=False)
    assert ["".join(r) for r in rows] == want.dump().split("\n")

def test_golden_batch(tmp_path):
    main(["golden", *ARGS, "--count", "3", "--outdir", str(tmp_path)])
    names = sorted(p.name for p in tmp_path.iterdir())
    assert names == ["000042.txt", "000043.txt", "000044.txt"]
    text = (tmp_path / "000043.txt").read_text(encoding="utf-8")
    assert text == generate_grid(43, width=21, height=15, enemy_count=3).dump() + "\n"

def test_defaults_come_from_config(tmp_path):
    out = tmp_path / "d.txt"
    main(["dump", "--seed", "9", "--out", str(out)])
    g = Grid.from_dump(out.read_text(encoding="utf-8"))
    assert (g.width, g.height) == (51, 51)
    assert g.dump() == generate_grid(9).dump()
