#### string parsing functions
from .util import reverse_dict, unpack_and_reverse_dict, log

################### accidentals

# map semitone offset values to accidental character aliases,
# where the last alias in each list is the canonical ascii spelling:
offset_accidentals = {-2: ['𝄫', '♭♭', 'bb'],
                      -1: ['♭', 'b'],
                       0: ['♮', ''],
                       1: ['♯', '#'],
                       2: ['𝄪', '♯♯', '##']}
# map accidental aliases to offsets:
accidental_offsets = unpack_and_reverse_dict(offset_accidentals)

# chord symbols are written out in plain ascii:
fl = 'b'
sh = '#'

preferred_accidentals = {offset: chars[-1] for offset, chars in offset_accidentals.items()}

def accidental_value(acc):
    """semitone offset of an accidental string, e.g. 'bb' gives -2"""
    if acc not in accidental_offsets:
        raise ValueError(f'Not a valid accidental: {acc}')
    return accidental_offsets[acc]

################### note names
natural_note_names = ['C', 'D', 'E', 'F', 'G', 'A', 'B']
# semitone positions of the white notes above C:
natural_positions = {'C': 0, 'D': 2, 'E': 4, 'F': 5, 'G': 7, 'A': 9, 'B': 11}
position_naturals = reverse_dict(natural_positions)

# map every spelled note name (every natural with every accidental alias) to its position:
note_positions = {}
for n in natural_note_names:
    for offset, accidentals in offset_accidentals.items():
        for acc in accidentals:
            note_positions[f'{n}{acc}'] = (natural_positions[n] + offset) % 12

# the preferred name of each position, with sharps or with flats:
preferred_note_names = {sh: [], fl: []}
for pos in range(12):
    if pos in position_naturals:
        preferred_note_names[sh].append(position_naturals[pos])
        preferred_note_names[fl].append(position_naturals[pos])
    else:
        preferred_note_names[sh].append(f'{position_naturals[pos-1]}{sh}')
        preferred_note_names[fl].append(f'{position_naturals[pos+1]}{fl}')

################### natural language names for numerical interval degrees

degree_names = {1: 'unison',  2: 'second', 3: 'third',
                4: 'fourth', 5: 'fifth', 6: 'sixth', 7: 'seventh', 8: 'octave',
                9: 'ninth', 10: 'tenth', 11: 'eleventh',
                12: 'twelfth', 13: 'thirteenth'}

################### note name parsing functions:

def is_valid_note_name(name: str):
    """returns True if string can be cast to a spelled note, like 'C' or 'Ebb'"""
    return isinstance(name, str) and name in note_positions

def is_natural_note_name(char: str):
    return char in natural_positions

def begins_with_accidental(name: str):
    """checks if a string begins with an accidental substring.
        returns 1 for a single-char accidental (e.g. # or 𝄫), 2 for a two-character accidental (e.g. ## or bb)
        and False if not an accidental."""
    if len(name) >= 2 and name[:2] in accidental_offsets:
        return 2
    elif len(name) >= 1 and name[:1] in accidental_offsets:
        return 1
    else:
        return False

# a single flat directly followed by '5' is the flat-five modifier of a chord symbol:
flat_five_tokens = ['b5', '♭5']

def chord_accidental_length(rest: str):
    """as begins_with_accidental, but for the substring that follows the letter of
    a chord symbol, where a flat followed by '5' belongs to the flat-five modifier
    rather than to the root: so 'Cb5' is C(b5), and 'Cbb5' is Cb(b5).
    the same goes for '♭5' and '♭♭5'. '𝄫' is a single double-flat glyph,
    so it always belongs to the root."""
    for token in flat_five_tokens:
        flat = token[0]
        if rest.startswith(token):
            return 0
        elif rest.startswith(flat + token):
            return 1
    acc_len = begins_with_accidental(rest)
    return acc_len if acc_len else 0

def note_split(name: str):
    """takes a string that begins with a note name (like a chord symbol, e.g. F#m7)
    and splits out the natural letter and accidental from whatever follows.
    returns a (natural, accidental, remainder) tuple."""
    if len(name) == 0 or not is_natural_note_name(name[0]):
        raise ValueError(f'No valid note letter at the start of: {name!r}')
    natural, rest = name[0], name[1:]
    acc_len = chord_accidental_length(rest)
    accidental, remainder = rest[:acc_len], rest[acc_len:]
    log(f'Split {name!r} into natural={natural}, accidental={accidental!r}, remainder={remainder!r}')
    return natural, accidental, remainder

def parse_octavenote_name(name: str):
    """Takes the name of a note in a specific octave as a string,
    for example 'C4' or 'A#3' or 'Gb-1', and extracts the note and octave components."""
    digit_idx = len(name)
    while digit_idx > 0 and name[digit_idx-1].isdigit():
        digit_idx -= 1
    if digit_idx > 0 and name[digit_idx-1] == '-':
        digit_idx -= 1
    note_name, octave_str = name[:digit_idx], name[digit_idx:]
    if octave_str in ('', '-'):
        raise ValueError(f'Could not parse an octave number out of note name: {name!r}')
    if not is_valid_note_name(note_name):
        raise ValueError(f'Could not parse note name: {name!r} ({note_name!r} is not a valid note)')
    return note_name, int(octave_str)
