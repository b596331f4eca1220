from scalar_tape.demo import main, parse_vector


def test_parse_vector():
    assert parse_vector("0.5, -1,2") == [0.5, -1.0, 2.0]


def test_demo_runs(capsys):
    assert main(["--hidden", "2", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "tanh(a * b):" in out
    assert "a: grad = 0.141302" in out
    assert "d: value =   3.0000  grad =   4.0000" in out
    assert "MLP(2 -> 2 -> 1):" in out
    assert "gradient check against bumping: ok" in out
    assert "COMPUTATION GRAPH SUMMARY" in out
