from closestpair.cli import OUTPUT_FILES, TEST_NAME, main


def test_main_writes_both_files(tmp_path, capsys):
    code = main(
        ["--directory", str(tmp_path), "--min", "8", "--max", "9", "--iterations", "2"]
    )
    assert code == 0
    for filename in OUTPUT_FILES:
        lines = (tmp_path / filename).read_text(encoding="utf-8").splitlines()
        assert lines[0] == "test_name,n,time_ns"
        rows = [line.split(",") for line in lines[1:]]
        assert len(rows) == 4
        assert all(r[0] == TEST_NAME for r in rows)
        assert sorted(int(r[1]) for r in rows) == [8, 8, 9, 9]


def test_main_reports_progress(tmp_path, capsys):
    main(["--directory", str(tmp_path), "--min", "5", "--max", "5", "--iterations", "1"])
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Inició el test"
    assert out[-1] == "Finalizó el test"
    saved = [line for line in out if line.startswith("Archivo guardado en ")]
    assert len(saved) == len(OUTPUT_FILES)
    assert saved[0].endswith("all.csv")


def test_main_step_controls_sizes(tmp_path):
    main(
        [
            "--directory", str(tmp_path),
            "--min", "4", "--max", "10", "--step", "3", "--iterations", "1",
        ]
    )
    lines = (tmp_path / "all.csv").read_text(encoding="utf-8").splitlines()[1:]
    assert [int(line.split(",")[1]) for line in lines] == [4, 7, 10]