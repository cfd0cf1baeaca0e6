"""Example session: build a seeded puzzle and let the greedy hint play it."""

from orbtangle import PuzzleOptions, best_swap, new_puzzle, print_puzzle


def main() -> None:
    state = new_puzzle(PuzzleOptions(random_seed=123))
    print(print_puzzle(state))
    while not state.is_solved:
        pair = best_swap(state)
        if pair is None:
            print("Stuck with", state.crossings, "crossing(s)")
            break
        state.select(pair[0])
        event = state.select(pair[1])
        report = state.settle()
        print(f"{event.kind} {event.vertex_id}<->{event.other_id}: {report.crossings} crossing(s)")
        if report.newly_solved:
            print("Solved!")
    print("Clean cycles:", sorted(state.clean_cycles()))


if __name__ == "__main__":
    main()
