from ..util import Log, log, reverse_dict, unpack_and_reverse_dict
from ..chords import Chord
from .testing_tools import compare

import pytest

def test_dict_helpers():
    compare(reverse_dict({'C': 0, 'D': 2}), {0: 'C', 2: 'D'})
    aliases = {'m': ['min', 'minor'], '': ['maj', 'major']}
    compare(unpack_and_reverse_dict(aliases), {'min': 'm', 'minor': 'm', 'maj': '', 'major': ''})
    with pytest.raises(TypeError):
        unpack_and_reverse_dict({'x': 'y'})

def test_log_is_silent_by_default(capsys):
    Chord.parse('Gm/C')
    out = capsys.readouterr().out
    compare(log.verbose, False)
    compare(out, '')

def test_verbose_log(capsys):
    verbose_log = Log(verbose=True)
    verbose_log('parsing something')
    out = capsys.readouterr().out
    compare('(test_verbose_log) parsing something' in out, True)

def test_verbose_log_does_not_change_results(capsys):
    quiet = str(Chord.parse('Em/C(no5)'))
    log.verbose = True
    try:
        loud = str(Chord.parse('Em/C(no5)'))
    finally:
        log.verbose = False
    compare(loud, quiet)
    compare('Parsed' in capsys.readouterr().out, True)
