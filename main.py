import logging

import collectors
from collectors import Collector, StringJoiner
from models import sample_persons
from streams import Stream, stream
from utils import format_inline, format_value, measure_performance

logger = logging.getLogger(__name__)

SEPARATOR = "----------"


def strings_demo():
    my_list = ["a1", "a2", "b1", "c2", "c1"]

    print("Original List:")
    print(format_inline(stream(my_list).to_list()))

    print("Filtered uppercased:")
    filtered = (
        stream(my_list)
        .filter(lambda s: s.startswith("c"))
        .map(str.upper)
        .sorted()
        .to_list()
    )
    print(format_inline(filtered))

    print("findFirst:")
    first = stream(my_list).find_first()
    if first is not None:
        print(format_inline([first]))


def numbers_demo():
    my_int_list = [5, 4, 7, 9, 2, 4, 3]

    print(SEPARATOR)
    print("Original List:")
    print(format_inline(my_int_list))

    print(f"Sum of entire Array: {stream(my_int_list).sum()}")
    print(f"Sum of Array with skip(1): {stream(my_int_list).skip(1).sum()}")

    sliced = stream(my_int_list).slice(2, 4)
    print("Sliced Array [2..4]:")
    print(format_inline(sliced.to_list()))
    print(f"Sum of sliced Array [2..4]: {sliced.sum()}")

    print(SEPARATOR)
    print("Direct Stream.of:")
    print(format_inline(Stream.of("a1", "a2", "a3").to_list()))

    print(SEPARATOR)
    print("Stream.range(1, 21):")
    print(format_inline(Stream.range(1, 21).to_list()))

    print(SEPARATOR)
    print("Stream.range(1, 6) with concatenation:")
    print(Stream.range(1, 6).map(lambda i: f"Gaga{i} ").join())


def persons_demo():
    persons = sample_persons()

    print(SEPARATOR)
    print("Persons List:")
    print(format_value(persons))

    print(SEPARATOR)
    print("Filtered list of Persons:")
    filtered = stream(persons).filter(lambda p: p.name.startswith("P")).to_list()
    print(format_value(filtered))

    print(SEPARATOR)
    print("Persons grouped by Age into a map:")
    persons_by_age = stream(persons).group_by(lambda p: p.age)
    for age, group in persons_by_age.items():
        print(f"age {age}: {format_value(group)}")

    names_by_age = stream(persons).to_map(
        lambda p: p.age,
        lambda p: p.name,
        lambda name1, name2: f"{name1};{name2}",
    )
    print(format_value(names_by_age))

    print(SEPARATOR)
    print("Average Age:")
    print(format_value(stream(persons).collect(collectors.averaging(lambda p: p.age))))

    print(SEPARATOR)
    print("Summary statistics:")
    perf = measure_performance(
        "summarizing",
        stream(persons).collect,
        collectors.summarizing(lambda p: p.age),
    )
    print(format_value(perf["result"]))
    logger.info(f"Summary statistics took {perf['execution_time_ms']:.3f} ms")

    print(SEPARATOR)
    print("String Concatenation (joining):")
    adults = stream(persons).filter(lambda p: p.age >= 18).map(lambda p: p.name)
    print(adults.join(" and ", "In Germany ", " are of legal age."))
    print(adults.join('", "', '("', '")'))

    print(SEPARATOR)
    print("Our own Collector:")
    person_name_collector = Collector.of(
        lambda: StringJoiner(" | "),
        lambda j, p: j.add(p.name.upper()),
        lambda j1, j2: j1.merge(j2),
        str,
    )
    print(stream(persons).collect(person_name_collector))
    print()


def main():
    logging.basicConfig(level=logging.INFO)
    logger.info("Running stream demos")
    strings_demo()
    numbers_demo()
    persons_demo()
    logger.info("Stream demos complete")


if __name__ == "__main__":
    main()
