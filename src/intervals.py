from .parsing import degree_names
from bisect import bisect_left
from functools import cached_property

# interval instances are cached for fast init, since they get called a lot:
cached_intervals = {}

class Interval:
    """an unsigned distance between two notes, defined in semitones.
    intervals are not bounded above, so compound intervals like the ninth (14)
    or the thirteenth (21) are just wider Intervals, not a separate type."""

    span_size = 12 # i.e. semitones per octave
    def __init__(self, value):
        if isinstance(value, Interval):
            # accept re-casting from another interval object:
            value = value.value
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f'Interval must be initialised with an int, but got: {type(value)}')
        if value < 0:
            raise ValueError(f'Intervals are non-negative semitone counts, but got: {value}')
        self.value = value
        # whole-octave span, and interval width-within-octave:
        self.octave_span, self.mod = divmod(self.value, self.span_size)
        # compound intervals span more than an octave:
        self.compound = (self.value >= self.span_size)

    @property
    def degree(self):
        """the (extended) scale degree this interval spans by default,
        e.g. 3 for a major third, 9 for a major ninth"""
        return default_interval_degrees[self.mod] + (7 * self.octave_span)

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value

    def __add__(self, other):
        if isinstance(other, (int, Interval)) and not isinstance(other, bool):
            return Interval.from_cache(self.value + int(other))
        else:
            raise TypeError(f'Intervals can only be added to integers or other Intervals, not: {type(other)}')

    def __radd__(self, other):
        return self + other

    def __sub__(self, other):
        if isinstance(other, (int, Interval)) and not isinstance(other, bool):
            return Interval.from_cache(self.value - int(other))
        else:
            raise TypeError(f'Intervals can only be subtracted by integers or other Intervals, not: {type(other)}')

    def __eq__(self, other):
        """Value equivalence comparison for intervals; an Interval is also equal to the int of its value"""
        if isinstance(other, Interval):
            return self.value == other.value
        elif isinstance(other, int):
            return self.value == other
        else:
            return NotImplemented

    def __lt__(self, other):
        if isinstance(other, (int, Interval)):
            return self.value < int(other)
        else:
            raise TypeError('Intervals can only be compared to integers or other Intervals')

    def __le__(self, other):
        return self < other or self == other

    def __gt__(self, other):
        if isinstance(other, (int, Interval)):
            return self.value > int(other)
        else:
            raise TypeError('Intervals can only be compared to integers or other Intervals')

    def __ge__(self, other):
        return self > other or self == other

    def __hash__(self):
        return hash(self.value)

    @cached_property
    def factor_name(self):
        """this interval as a chord factor, like '3' or 'm7' or '13'"""
        return f'{factor_prefixes[self.mod]}{self.degree}'

    @cached_property
    def name(self):
        if self.degree in degree_names:
            degree_name = degree_names[self.degree].capitalize()
        else:
            # wider than a thirteenth, so we just number it:
            degree_name = f'{self.degree}th'
        return f'{interval_qualities[self.mod].capitalize()} {degree_name}'

    def __str__(self):
        return self.factor_name

    def __repr__(self):
        return f'<{self.value}:{self.name}>'

    @staticmethod
    def from_cache(value):
        """return a cached Interval object with this value if it exists,
        otherwise initialise a new one"""
        if isinstance(value, Interval):
            return value
        if value in cached_intervals:
            return cached_intervals[value]
        new_interval = Interval(value)
        cached_intervals[value] = new_interval
        return new_interval


class IntervalSet:
    """an ascending collection of distinct Intervals, each measured from the same reference note.

    the set is kept canonical at all times: pushing an interval that is already present
    does nothing, and iteration always yields intervals in ascending order, each once."""
    def __init__(self, *items):
        if len(items) == 1 and not isinstance(items[0], (int, Interval)):
            # been passed an iterable of items, instead of a series of items
            items = items[0]
        self._intervals = []
        self.extend(items)

    def push(self, interval):
        """inserts an interval (or an int that casts to one) unless it is already present"""
        interval = Interval.from_cache(interval)
        idx = bisect_left(self._intervals, interval)
        if idx == len(self._intervals) or self._intervals[idx] != interval:
            self._intervals.insert(idx, interval)

    def extend(self, intervals):
        for interval in intervals:
            self.push(interval)

    def contains(self, interval):
        """returns True if an interval of exactly this semitone value is in the set"""
        if isinstance(interval, bool) or not isinstance(interval, (int, Interval)):
            return False
        idx = bisect_left(self._intervals, int(interval))
        return idx < len(self._intervals) and self._intervals[idx] == interval

    def __contains__(self, item):
        return self.contains(item)

    def map(self, func):
        """applies func to every interval, and returns the results as a new
        (sorted, deduplicated) IntervalSet. results that collide are merged."""
        return IntervalSet([func(interval) for interval in self._intervals])

    def __add__(self, other):
        """raises every interval in this set by some number of semitones"""
        return self.map(lambda interval: interval + other)

    def __iter__(self):
        # iterate over a snapshot, so pushing during iteration is harmless:
        return iter(list(self._intervals))

    def drain(self):
        """consuming iteration: yields each interval in ascending order,
        removing it from this set as it goes"""
        while len(self._intervals) > 0:
            yield self._intervals.pop(0)

    def pop_lowest(self):
        """removes and returns the lowest interval, or None if the set is empty"""
        if len(self._intervals) == 0:
            return None
        return self._intervals.pop(0)

    def remove(self, interval):
        """removes an interval if present (and does nothing otherwise)"""
        if interval in self:
            self._intervals.remove(interval)

    def __len__(self):
        return len(self._intervals)

    def __eq__(self, other):
        if isinstance(other, IntervalSet):
            return self._intervals == other._intervals
        elif isinstance(other, (list, tuple)):
            return self.values() == [int(i) for i in other]
        else:
            return NotImplemented

    # mutable, so not hashable:
    __hash__ = None

    def copy(self):
        new_set = IntervalSet()
        new_set._intervals = list(self._intervals)
        return new_set

    def to_list(self):
        return list(self._intervals)

    def values(self):
        """the semitone values of this set's intervals, as plain ints"""
        return [i.value for i in self._intervals]

    def __str__(self):
        return f'{{{", ".join([str(i) for i in self._intervals])}}}'

    def __repr__(self):
        return f'IntervalSet({self.values()})'


# how many whole tones does each semitone interval correspond to (by default):
default_interval_degrees = {
                0: 1,          # e.g. unison (0 semitones) is degree 1
                1:2, 2:2,      # seconds (1 or 2 semitones) are degree 2, etc.
                3:3, 4:3,
                5:4,
                6:5,           # by convention: dim5 is more common than aug4
                7:5,
                8:6, 9:6,
                10:7, 11:7,
                }

interval_qualities = {0: 'perfect', 1: 'minor', 2: 'major', 3: 'minor',
                      4: 'major', 5: 'perfect', 6: 'diminished', 7: 'perfect',
                      8: 'minor', 9: 'major', 10: 'minor', 11: 'major'}

# chord factor prefixes, as written in chord symbols:
factor_prefixes = {0: '', 1: 'm', 2: '', 3: 'm', 4: '', 5: '', 6: 'b',
                   7: '', 8: 'm', 9: '', 10: 'm', 11: 'maj'}


# interval aliases:

UNISON = Unison = P1 = Rt = Interval(0)

MINOR_SECOND = MinorSecond = Min2 = m2 = Interval(1)
MAJOR_SECOND = MajorSecond = Maj2 = M2 = Interval(2)

MINOR_THIRD = MinorThird = Min3 = m3 = Interval(3)
MAJOR_THIRD = MajorThird = Maj3 = M3 = Interval(4)

PERFECT_FOURTH = PerfectFourth = Per4 = P4 = Interval(5)
TRITONE = Tritone = DimFifth = d5 = Interval(6)
PERFECT_FIFTH = PerfectFifth = Per5 = P5 = Interval(7)

MINOR_SIXTH = MinorSixth = Min6 = m6 = Interval(8)
MAJOR_SIXTH = MajorSixth = Maj6 = M6 = Interval(9)

MINOR_SEVENTH = MinorSeventh = Min7 = m7 = Interval(10)
MAJOR_SEVENTH = MajorSeventh = Maj7 = M7 = Interval(11)

OCTAVE = P8 = Interval(12)

# compound intervals:
MINOR_NINTH = MinorNinth = Min9 = m9 = Interval(13)
MAJOR_NINTH = MajorNinth = Maj9 = M9 = Interval(14)
PERFECT_ELEVENTH = PerfectEleventh = Per11 = P11 = Interval(17)
THIRTEENTH = MAJOR_THIRTEENTH = MajorThirteenth = Maj13 = M13 = Interval(21)

common_intervals = [P1, m2, M2, m3, M3, P4, d5, P5, m6, M6, m7, M7, P8, m9, M9, P11, M13]
# cache common intervals by semitone value for efficiency:
cached_intervals.update({iv.value: iv for iv in common_intervals})
