import pytest
from werkzeug.wrappers import Request, Response

from chain_request_handler.handler import RequestHandler, FunctionHandler


@pytest.mark.unit
def test_request_handler_is_abstract():
    with pytest.raises(TypeError):
        RequestHandler()


@pytest.mark.unit
def test_function_handler_delegates_to_callable():
    seen = []

    def hello(request):
        seen.append(request)
        return Response("hello", status=200)

    handler = FunctionHandler(hello)
    req = Request.from_values(path="/hello")
    res = handler.handle(req)
    assert res.status_code == 200 and res.get_data(as_text=True) == "hello"
    assert seen == [req]
    assert handler.func is hello
    assert repr(handler) == "FunctionHandler(hello)"
