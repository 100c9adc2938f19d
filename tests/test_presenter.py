import io
import webbrowser

from service_open.models import ResolvedEndpoint, ServiceRecord
from service_open.presenter import TABLE_HEADERS, build_rows, open_in_browser, print_table, print_url, render_table


def test_rows_cover_every_namespace(records):
    rows = build_rows(records, "api", "10.0.0.5")
    assert rows == [
        ["myproject", "api", "10.0.0.5:30080", "", ""],
        ["staging", "api", "10.0.0.5:31080", "", ""],
    ]


def test_rows_join_routes_and_weights():
    rec = ServiceRecord(
        namespace="ns",
        name="web",
        route_urls=("http://a.example.com", "http://b.example.com"),
        weights=("25%", "75%"),
    )
    assert build_rows([rec], "web", "h") == [["ns", "web", "", "http://a.example.com\nhttp://b.example.com", "25%\n75%"]]


def test_rows_do_not_leak_between_records():
    recs = [
        ServiceRecord(namespace="a", name="web", route_urls=("http://a",), weights=("100%",)),
        ServiceRecord(namespace="b", name="web", node_port="30000"),
    ]
    rows = build_rows(recs, "web", "h")
    assert rows[1] == ["b", "web", "h:30000", "", ""]


def test_empty_match_renders_header_only_table(records):
    table = render_table(records, "missing", "10.0.0.5")
    for header in TABLE_HEADERS:
        assert header in table
    assert "myproject" not in table
    assert build_rows(records, "missing", "10.0.0.5") == []


def test_table_contains_record_values(records):
    out = io.StringIO()
    print_table(records, "frontend", "10.0.0.5", out)
    text = out.getvalue()
    assert "myproject" in text
    assert "http://frontend.example.com" in text
    assert text.endswith("\n")


def test_port_like_values_are_not_reformatted():
    rec = ServiceRecord(namespace="ns", name="web", node_port="08080")
    assert "h:08080" in render_table([rec], "web", "h")


def test_print_url_writes_only_the_url():
    out = io.StringIO()
    print_url(ResolvedEndpoint(url="http://10.0.0.5:30080", namespace="ns", name="api", source="node-port"), out)
    assert out.getvalue() == "http://10.0.0.5:30080\n"


def test_open_in_browser_dispatches_url():
    opened = []
    out = io.StringIO()
    endpoint = ResolvedEndpoint(url="https://web.example.com", namespace="ns", name="web", source="route")

    assert open_in_browser(endpoint, out, opener=lambda url: opened.append(url) or True) is True
    assert opened == ["https://web.example.com"]
    assert out.getvalue() == "Opening the route/NodePort https://web.example.com in the default browser...\n"


def test_open_in_browser_failure_is_not_raised(caplog):
    def broken(url):
        raise webbrowser.Error("no display")

    endpoint = ResolvedEndpoint(url="http://x", namespace="ns", name="web", source="route")
    assert open_in_browser(endpoint, io.StringIO(), opener=broken) is False
    assert "Could not launch a browser" in caplog.text
