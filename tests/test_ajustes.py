"""Tests for settings dataclasses and settings.json persistence."""

import json

from ajustes import BackdropSettings, CameraSettings, FollowSettings


class TestDefaults:

    def test_follow_defaults(self):
        s = FollowSettings()
        assert (s.left_bound, s.right_bound, s.top_bound, s.bottom_bound) == (2.0, 2.0, 1.5, 1.5)
        assert s.follow_x and s.follow_y
        assert s.smooth_follow is False
        assert s.follow_speed == 2.0
        assert s.offset == (0.0, 0.0, 0.0)

    def test_backdrop_defaults(self):
        s = BackdropSettings()
        assert s.follow_x and s.follow_y
        assert (s.parallax_x, s.parallax_y) == (0.0, 0.0)
        assert s.auto_scale is True
        assert s.scale_multiplier == 1.2


class TestFromDict:

    def test_ignores_unknown_keys(self):
        s = FollowSettings.from_dict({"left_bound": 3, "nope": 1})
        assert s.left_bound == 3.0
        assert isinstance(s.left_bound, float)

    def test_coerces_offset_and_flags(self):
        s = BackdropSettings.from_dict({"offset": [1, 2], "follow_y": 0, "parallax_x": "0.5"})
        assert s.offset == (1.0, 2.0, 0.0)
        assert s.follow_y is False
        assert s.parallax_x == 0.5

    def test_string_flag_warns_and_keeps_default(self, capsys):
        s = FollowSettings.from_dict({"follow_x": "false", "smooth_follow": 1})
        assert s.follow_x is True
        assert s.smooth_follow is True
        assert "[WARN]" in capsys.readouterr().out


class TestLoadSave:

    def test_missing_file_gives_defaults(self, tmp_path, capsys):
        s = CameraSettings.load(tmp_path / "settings.json")
        assert s == CameraSettings()
        assert capsys.readouterr().out == ""

    def test_roundtrip(self, tmp_path):
        path = tmp_path / "settings.json"
        s = CameraSettings()
        s.follow.smooth_follow = True
        s.backdrop.parallax_y = 0.25
        s.save(path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["camera_follow"]["smooth_follow"] is True
        assert CameraSettings.load(path) == s

    def test_invalid_json_warns(self, tmp_path, capsys):
        path = tmp_path / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        s = CameraSettings.load(path)
        assert s == CameraSettings()
        assert "[WARN]" in capsys.readouterr().out

    def test_bad_value_warns(self, tmp_path, capsys):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"camera_follow": {"left_bound": "lejos"}}), encoding="utf-8")
        assert CameraSettings.load(path) == CameraSettings()
        assert "[WARN]" in capsys.readouterr().out

    def test_save_to_missing_dir_warns(self, tmp_path, capsys):
        CameraSettings().save(tmp_path / "no" / "existe.json")
        assert "[WARN]" in capsys.readouterr().out
