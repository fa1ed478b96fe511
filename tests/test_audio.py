import base64

from host.audio import SilentAudioNotifier, StreamlitAudioNotifier, audio_html


def test_audio_html_sets_volume_and_loop():
    html = audio_html(b"RIFF", volume=0.4, loop=True)

    assert "a.volume = 0.40;" in html
    assert "autoplay loop" in html
    assert base64.b64encode(b"RIFF").decode("ascii") in html


def test_audio_html_clamps_volume_and_omits_loop():
    html = audio_html(b"RIFF", volume=3.0, loop=False)

    assert "a.volume = 1.00;" in html
    assert " loop" not in html


def test_victory_cue_drawn_on_every_result_run(tmp_path):
    sound = tmp_path / "win.wav"
    sound.write_bytes(b"RIFF")
    calls = []
    notifier = StreamlitAudioNotifier(victory_path=str(sound), player=lambda path, **kw: calls.append((path, kw)))

    notifier.render_victory()
    assert calls == []

    notifier.play_victory()
    notifier.render_victory()
    notifier.render_victory()

    assert calls == [(str(sound), {"volume": 1.0, "loop": False})] * 2

    notifier.disarm_victory()
    notifier.render_victory()
    assert len(calls) == 2


def test_music_follows_volume(tmp_path):
    music = tmp_path / "music.wav"
    music.write_bytes(b"RIFF")
    calls = []
    notifier = StreamlitAudioNotifier(music_path=str(music), player=lambda path, **kw: calls.append(kw))

    notifier.play_music(0.3)
    notifier.play_music(0.8)

    assert notifier.music_on
    assert calls == [{"volume": 0.3, "loop": True}, {"volume": 0.8, "loop": True}]

    notifier.play_music(0.0)
    assert not notifier.music_on
    assert len(calls) == 2
    notifier.stop_music()
    assert not notifier.music_on


def test_player_failure_is_swallowed(tmp_path):
    music = tmp_path / "music.wav"
    music.write_bytes(b"RIFF")

    def broken(path, **kw):
        raise RuntimeError("autoplay blocked")

    notifier = StreamlitAudioNotifier(music_path=str(music), player=broken)

    notifier.play_music(0.5)

    assert notifier.music_on is False


def test_missing_file_is_swallowed(tmp_path):
    calls = []
    notifier = StreamlitAudioNotifier(victory_path=str(tmp_path / "nope.wav"), player=lambda *a, **k: calls.append(a))

    notifier.play_victory()
    notifier.render_victory()

    assert calls == []


def test_silent_notifier():
    notifier = SilentAudioNotifier()
    notifier.play_victory()
    notifier.play_music(0.5)
    assert notifier.victories == 1
    assert notifier.music_on
    notifier.stop_music()
    assert not notifier.music_on
