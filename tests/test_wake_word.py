from salonsync.voice.wake_word import WakeWordListener, recognizer_locale


def make_listener(**kwargs):
    activations = []
    listener = WakeWordListener(lambda: activations.append(True), **kwargs)
    return listener, activations


def test_wake_word_activates_overlay():
    listener, activations = make_listener()

    assert listener.feed("Hé SYNC, foglalj egy időpontot")
    assert activations == [True]
    assert listener.overlay_active


def test_other_speech_is_ignored():
    listener, activations = make_listener()

    assert not listener.feed("jó napot")
    assert activations == []


def test_disabled_listener_does_not_activate():
    listener, activations = make_listener(enabled=False)

    assert not listener.feed("sync")
    assert activations == []


def test_no_activation_while_overlay_is_open():
    listener, activations = make_listener()
    listener.feed("sync")

    assert not listener.feed("sync again")
    assert activations == [True]


def test_recognizer_locales():
    assert recognizer_locale("hu") == "hu-HU"
    assert recognizer_locale("ro") == "ro-RO"
    assert recognizer_locale("en") == "en-US"
    assert make_listener(lang="ro")[0].locale == "ro-RO"
