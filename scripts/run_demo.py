import sys

from multi_stopwatch.demo import main


if __name__ == "__main__":

    sys.exit(main(sys.argv[1:]))
