"""staff: chord symbols to MIDI notes and back"""

from .intervals import Interval, IntervalSet
from .notes import Natural, Note, Pitch, Octave, MidiNote, frequencies
from .chords import Chord, MidiNotes
from .util import log
