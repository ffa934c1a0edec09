import io

from qsim.cli import main, simulate

X = [[0j, 1 + 0j], [1 + 0j, 0j]]


def test_simulate_x_swaps_amplitudes():
    state = [complex(0.6, 0), complex(0, 0.8)]
    result = simulate([X], state, io.StringIO())
    assert result == [state[1], state[0]]


def test_simulate_double_x_restores_state():
    state = [complex(0.6, 0.1), complex(-0.3, 0.8)]
    assert simulate([X, X], state, io.StringIO()) == state


def test_simulate_without_gates_keeps_state():
    out = io.StringIO()
    state = [complex(1, 0), 0j, 0j, 0j]
    assert simulate([], state, out) == state
    assert out.getvalue().startswith("PRODOTTO:\n")


def test_simulate_reports_steps():
    out = io.StringIO()
    simulate([X, X], [1 + 0j, 0j], out)
    text = out.getvalue()
    for label in ("fattore1 0:", "fattore2 1:", "risultato 1:", "PRODOTTO:"):
        assert label in text
    assert "STATO FINALE:\n" in text


def _write_inputs(tmp_path, init_text, circ_text):
    init = tmp_path / "init.txt"
    circ = tmp_path / "circ.txt"
    init.write_text(init_text, encoding="utf-8")
    circ.write_text(circ_text, encoding="utf-8")
    return str(init), str(circ)


def test_main_runs_circuit(tmp_path, capsys):
    init, circ = _write_inputs(
        tmp_path,
        "#qubits 1\n#init [1+i0, 0+i0]\n",
        "#define X [(0,1)(1,0)]\n#circ XX\n",
    )
    assert main([init, circ]) == 0
    output = capsys.readouterr().out
    assert output.startswith("STATO INIZIALE:\n")
    initial = output.splitlines()[1]
    final = output.split("STATO FINALE:\n", 1)[1]
    assert final == initial


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt"), str(tmp_path / "nope2.txt")]) == 1
    assert "qsim:" in capsys.readouterr().err


def test_main_bad_init_vector(tmp_path, capsys):
    init, circ = _write_inputs(
        tmp_path,
        "#qubits 2\n#init [1+i0, 0+i0]\n",
        "#define X [(0,1)(1,0)]\n#circ X\n",
    )
    assert main([init, circ]) == 1
    assert capsys.readouterr().out == ""


def test_main_missing_circuit(tmp_path, capsys):
    init, circ = _write_inputs(
        tmp_path,
        "#qubits 1\n#init [1+i0, 0+i0]\n",
        "#define X [(0,1)(1,0)]\n",
    )
    assert main([init, circ]) == 1
    assert "STATO FINALE" not in capsys.readouterr().out