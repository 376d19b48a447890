import json

from highscore import HighScoreStore


def test_missing_file_reads_zero(tmp_path):
    assert HighScoreStore(tmp_path / "none.json").load() == 0


def test_save_then_load(tmp_path):
    path = tmp_path / "nested" / "scores.json"
    store = HighScoreStore(path)
    assert store.save(7)
    assert HighScoreStore(path).load() == 7
    assert json.loads(path.read_text()) == {"snakeHighScore": 7}


def test_lower_score_is_not_written(tmp_path):
    store = HighScoreStore(tmp_path / "scores.json")
    store.save(10)
    assert not store.save(3)
    assert store.load() == 10


def test_other_keys_are_kept(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"volume": 3, "snakeHighScore": 1}))
    HighScoreStore(path).save(4)
    assert json.loads(path.read_text()) == {"volume": 3, "snakeHighScore": 4}


def test_corrupt_file_reads_zero(tmp_path, caplog):
    path = tmp_path / "scores.json"
    path.write_text("{not json")
    assert HighScoreStore(path).load() == 0
    assert "Could not read high score" in caplog.text


def test_non_integer_value_reads_zero(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"snakeHighScore": "lots"}))
    assert HighScoreStore(path).load() == 0


def test_string_number_is_accepted(tmp_path):
    path = tmp_path / "scores.json"
    path.write_text(json.dumps({"snakeHighScore": "15"}))
    assert HighScoreStore(path).load() == 15


def test_unwritable_path_is_logged(tmp_path, caplog):
    blocker = tmp_path / "file"
    blocker.write_text("")
    store = HighScoreStore(blocker / "scores.json")
    assert not store.save(5)
    assert "Could not save high score" in caplog.text
