import click
import pytest
from gitsy.errors import PromptRejected
from gitsy.prompts import OptionPrompt, Rejected, Selected, confirm


def _yes_no():
    return OptionPrompt('Continue?', [('y', 'Yes'), ('n', 'No')], ('n', 'No'))


def _answer(monkeypatch, answer):
    monkeypatch.setattr('click.prompt', lambda *args, **kwargs: answer)


def test_empty_input_selects_default(monkeypatch):
    _answer(monkeypatch, '')
    assert _yes_no().prompt() == Selected('No')


def test_key_match_is_case_insensitive(monkeypatch):
    _answer(monkeypatch, 'Y')
    assert _yes_no().prompt() == Selected('Yes')


def test_label_match_counts(monkeypatch):
    _answer(monkeypatch, '  yes  ')
    assert _yes_no().prompt() == Selected('Yes')


def test_unknown_input_is_rejected_naming_default(monkeypatch):
    _answer(monkeypatch, 'maybe')

    outcome = _yes_no().prompt()

    assert isinstance(outcome, Rejected)
    assert outcome.default_label == 'No'
    assert 'No' in outcome.message


def test_rejected_falls_back_to_unregistered_default():
    """Default key that is not an option should report the default's own label."""
    prompt = OptionPrompt('Pick', [('a', 'Apple')], ('z', 'Zebra'))
    assert prompt.match('q') == Rejected('Zebra')


def test_rejected_uses_registered_label_for_default_key():
    prompt = OptionPrompt('Pick', [('a', 'Apple'), ('b', 'Banana')], ('B', 'Something else'))
    assert prompt.match('q') == Rejected('Banana')


def test_first_match_wins():
    prompt = OptionPrompt('Pick', [('x', 'Exit'), ('exit', 'Quit')], ('x', 'Exit'))
    assert prompt.match('exit') == Selected('Exit')


def test_render_sorts_and_tags_default():
    prompt = OptionPrompt(
        'Should we proceed?',
        [('y', 'Yes'), ('n', 'No'), ('a', 'Always'), ('q', 'Quit')],
        ('y', 'Yes'),
    )

    lines = prompt.render().splitlines()

    assert lines[0] == 'Should we proceed?'
    assert [line.split(':')[0].strip() for line in lines[1:]] == ['a', 'n', 'q', 'y']
    assert lines[4].endswith('[Default]')
    assert '[Default]' not in ''.join(lines[1:4])


def test_render_tags_only_exact_default_pair():
    prompt = OptionPrompt('Pick', [('n', 'Nope')], ('n', 'No'))
    assert '[Default]' not in prompt.render()


def test_with_option_appends():
    prompt = OptionPrompt('Pick').with_option('a', 'Apple').with_option('b', 'Banana')
    assert prompt.options == [('a', 'Apple'), ('b', 'Banana')]


def test_choose_raises_on_rejection(monkeypatch):
    _answer(monkeypatch, 'maybe')

    with pytest.raises(PromptRejected) as exc_info:
        _yes_no().choose()

    assert exc_info.value.default_label == 'No'


def test_closed_input_aborts(monkeypatch):
    """EOF on stdin should abort rather than be treated as an answer."""
    def eof(*args, **kwargs):
        raise click.Abort()

    monkeypatch.setattr('click.prompt', eof)

    with pytest.raises(click.Abort):
        confirm('Continue?')


@pytest.mark.parametrize('answer, expected', [
    ('y', True),
    ('YES', True),
    ('', False),
    ('n', False),
    ('No', False),
    ('maybe', False),
])
def test_confirm(monkeypatch, answer, expected):
    _answer(monkeypatch, answer)
    assert confirm('Continue?') is expected


def test_confirm_reports_rejection(monkeypatch, capsys):
    _answer(monkeypatch, 'maybe')

    confirm('Continue?')

    assert 'Defaulting to: No' in capsys.readouterr().err
