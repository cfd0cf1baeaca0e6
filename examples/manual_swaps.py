"""Example: untangle a hand-made bowtie through the selection flow."""

from orbtangle import Edge, PuzzleState, Vertex, print_puzzle

VERTICES = [Vertex(0, 10.0, 0.0), Vertex(1, 0.0, 0.0), Vertex(2, 10.0, 10.0), Vertex(3, 0.0, 10.0)]
EDGES = [Edge(0, 1, 0), Edge(1, 2, 0), Edge(2, 3, 0), Edge(3, 0, 0)]


def main() -> None:
    state = PuzzleState(VERTICES, EDGES)
    print(print_puzzle(state))
    for vertex_id in (0, 0, 0, 1):
        print(state.select(vertex_id))
    report = state.settle()
    print("Crossings:", report.crossings, "newly solved:", report.newly_solved)
    print(print_puzzle(state))


if __name__ == "__main__":
    main()
