from src.error_handler import ApiError, ErrorHandler, forced_error, not_found


def test_handle_exception_returns_envelope():
    eh = ErrorHandler()
    out = eh.handle_exception(Exception("boom"), context={"module": "cheques"})
    assert out["error"]["code"] == "ERR_INTERNAL"
    assert "internal error" in out["error"]["message"].lower()
    assert out["error"]["module"] == "cheques"
    assert "boom" not in out["error"]["message"]


def test_envelope_omits_retriable_when_unset():
    assert not_found().to_envelope() == {
        "error": {"code": "ERR_NOT_FOUND", "message": "Request not found", "module": "cheques"}
    }
    err = ApiError("ERR_UPSTREAM_UNAVAILABLE", "down", status_code=503, module="loans", retriable=False)
    assert err.to_envelope()["error"]["retriable"] is False


def test_forced_error_codes():
    upload = forced_error("ERR_UPLOAD_FAILED")
    assert (upload.code, upload.status_code, upload.retriable) == ("ERR_UPLOAD_FAILED", 500, None)

    upstream = forced_error(" err_upstream_unavailable ")
    assert (upstream.code, upstream.status_code, upstream.retriable) == ("ERR_UPSTREAM_UNAVAILABLE", 503, True)

    assert forced_error("ERR_VALIDATION").status_code == 400
    assert forced_error(None) is None
    assert forced_error("") is None
    assert forced_error("ERR_TEAPOT") is None
