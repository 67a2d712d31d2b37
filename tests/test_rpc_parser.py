import pytest

from protoc_ts.models import StreamBehaviour, TranslateOptions
from protoc_ts.parser.rpc_parser import match_rpc, parse_rpc_line, render_stream_type


def _options(behaviour="native", **kwargs) -> TranslateOptions:
    return TranslateOptions(stream_behaviour=behaviour, **kwargs)


class TestMatchRpc:
    def test_unary(self):
        method = match_rpc("  rpc GetFeature(Point) returns (Feature) {}")
        assert method.name == "GetFeature"
        assert method.request_type == "Point"
        assert method.response_type == "Feature"
        assert method.request_stream is False
        assert method.response_stream is False

    def test_streams(self):
        method = match_rpc("rpc RouteChat(stream RouteNote) returns (stream RouteNote);")
        assert method.request_stream is True
        assert method.response_stream is True
        assert method.request_type == "RouteNote"

    def test_type_starting_with_stream_is_not_a_stream(self):
        method = match_rpc("rpc Get(Streamer) returns (streamer);")
        assert method.request_stream is False
        assert method.request_type == "Streamer"
        assert method.response_type == "streamer"

    def test_extra_whitespace(self):
        method = match_rpc("rpc Get ( Point )returns( Feature );")
        assert (method.name, method.request_type, method.response_type) == ("Get", "Point", "Feature")

    def test_no_match(self):
        assert match_rpc("rpc Broken(") is None


class TestParseRpcLine:
    def test_native_unary(self):
        line = "rpc GetFeature(Point) returns (Feature);"
        assert parse_rpc_line(line, _options("native")) == "getFeature (point: Point): Feature"

    def test_generic_stream_request(self):
        line = "rpc GetFeature(stream Point) returns (Feature);"
        assert parse_rpc_line(line, _options("generic")) == "getFeature (pointStream: Stream<Point>): Feature"

    def test_native_stream_request(self):
        line = "rpc GetFeature(stream Point) returns (Feature);"
        assert parse_rpc_line(line, _options("native")) == "getFeature (pointStream: Stream): Feature"

    def test_strip_ignores_stream_markers(self):
        line = "rpc RouteChat(stream RouteNote) returns (stream RouteNote);"
        result = parse_rpc_line(line, _options("strip"))
        assert result == "routeChat (routeNote: RouteNote): RouteNote"
        assert "Stream" not in result

    def test_metadata_parameter(self):
        line = "rpc GetFeature(Point) returns (Feature);"
        result = parse_rpc_line(line, _options(use_metadata=True))
        assert result == "getFeature (point: Point, metadata: any): Feature"

    def test_observable_wraps_return_type(self):
        line = "rpc ListFeatures(Rectangle) returns (stream Feature);"
        result = parse_rpc_line(line, _options("generic", use_observable=True))
        assert result == "listFeatures (rectangle: Rectangle): Observable<Stream<Feature>>"

    def test_observable_with_metadata(self):
        line = "rpc GetFeature(Point) returns (Feature);"
        result = parse_rpc_line(line, _options(use_observable=True, use_metadata=True))
        assert result == "getFeature (point: Point, metadata: any): Observable<Feature>"

    def test_unmatched_line_passes_through(self):
        line = "  rpc Weird;"
        assert parse_rpc_line(line, _options()) == line


# (request_stream, response_stream) -> expected signature per behaviour
STREAM_CASES = [
    ("", "", {
        "strip": "call (point: Point): Feature",
        "generic": "call (point: Point): Feature",
        "native": "call (point: Point): Feature",
    }),
    ("stream ", "", {
        "strip": "call (point: Point): Feature",
        "generic": "call (pointStream: Stream<Point>): Feature",
        "native": "call (pointStream: Stream): Feature",
    }),
    ("", "stream ", {
        "strip": "call (point: Point): Feature",
        "generic": "call (point: Point): Stream<Feature>",
        "native": "call (point: Point): Stream",
    }),
    ("stream ", "stream ", {
        "strip": "call (point: Point): Feature",
        "generic": "call (pointStream: Stream<Point>): Stream<Feature>",
        "native": "call (pointStream: Stream): Stream",
    }),
]


class TestStreamCombinations:
    @pytest.mark.parametrize("behaviour", ["strip", "generic", "native"])
    @pytest.mark.parametrize("request_stream, response_stream, expected", STREAM_CASES)
    def test_signature(self, behaviour, request_stream, response_stream, expected):
        line = f"rpc Call({request_stream}Point) returns ({response_stream}Feature);"
        assert parse_rpc_line(line, _options(behaviour)) == expected[behaviour]


class TestRenderStreamType:
    def test_not_a_stream(self):
        assert render_stream_type("Point", False, StreamBehaviour.GENERIC) == "Point"

    def test_each_behaviour(self):
        assert render_stream_type("Point", True, StreamBehaviour.STRIP) == "Point"
        assert render_stream_type("Point", True, StreamBehaviour.GENERIC) == "Stream<Point>"
        assert render_stream_type("Point", True, StreamBehaviour.NATIVE) == "Stream"
