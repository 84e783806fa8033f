import io

from structkit.graph import Graph
from structkit.graph_cli import main, run_menu


def run(text, size=5, directed=False):
    graph = Graph(size, directed)
    out = io.StringIO()
    run_menu(graph, size, io.StringIO(text), out)
    return graph, out.getvalue()


def test_add_edge_updates_graph_and_reports():
    graph, output = run("1 1 2\n4\n")
    assert "Edge added between 1 and 2.\n" in output
    assert graph.neighbours(1) == (2,)
    assert output.endswith("Exiting the program.\n")


def test_vertex_above_limit_is_rejected():
    graph, output = run("1 9\n4\n", size=5)
    assert "Please enter value less then the number of vertix\n" in output
    assert graph.neighbours(9) == ()


def test_end_vertex_above_limit_is_rejected():
    graph, output = run("1 1 9\n4\n", size=5)
    assert output.count("Please enter value less then the number of vertix") == 1
    assert graph.neighbours(1) == ()


def test_vertex_equal_to_limit_is_accepted():
    graph, output = run("1 5 1\n4\n", size=5)
    assert graph.neighbours(5) == (1,)


def test_bfs_output_line():
    _, output = run("1 1 2\n1 2 3\n3 1\n4\n")
    assert "BFS Traversal starting from vertex 1: 1 2 3 \n" in output


def test_bfs_missing_vertex_message():
    _, output = run("3 4\n4\n")
    assert "Vertex 4 does not exist in the graph.\n" in output


def test_invalid_choice_message():
    _, output = run("7\n4\n")
    assert "Invalid choice! Please enter a valid option.\n" in output


def test_menu_shown_each_round():
    _, output = run("7\n7\n4\n")
    assert output.count("--- Graph Menu ---") == 3


def test_end_of_input_stops_menu():
    graph, output = run("1 1 2\n")
    assert graph.neighbours(2) == (1,)
    assert "Exiting the program." not in output


def test_main_builds_directed_graph(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n1\n1 1 2\n3 2\n4\n"))
    assert main([]) == 0
    output = capsys.readouterr().out
    assert "Edge added between 1 and 2." in output
    assert "Vertex 2 does not exist in the graph." in output


def test_main_reprompts_direction(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n3\n0\n1 1 2\n3 2\n4\n"))
    assert main([]) == 0
    output = capsys.readouterr().out
    assert output.count("Please enter again: ") == 1
    assert "BFS Traversal starting from vertex 2: 2 1 \n" in output


def test_main_fails_on_empty_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1
    assert "unexpected end of input" in capsys.readouterr().err