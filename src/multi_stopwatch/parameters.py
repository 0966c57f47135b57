""" A module collecting unit constants used by the timers. """

####################################################
# Calendar duration ticks (100 nanoseconds per tick).
####################################################

DATETIME_TICKS_PER_MICROSECOND = 10
DATETIME_TICKS_PER_MILLISECOND = 10_000
DATETIME_TICKS_PER_SECOND = 10_000_000
NANOSECONDS_PER_DATETIME_TICK = 100


#########################
# Monotonic clock source.
#########################

# perf_counter_ns() counts nanoseconds.
PERF_COUNTER_FREQUENCY = 1_000_000_000

# A clock resolution (in seconds) at or below one calendar tick counts as high resolution.
HIGH_RESOLUTION_THRESHOLD = NANOSECONDS_PER_DATETIME_TICK * 1e-9
