from coreason_aem_client.domain.response import Response
from coreason_aem_client.operations import ResponseSpec
from coreason_aem_client.parsers.xml import xml_package_list

SPEC = ResponseSpec("xml_package_list", "All packages list retrieved successfully")


def _listing(code: str, text: str) -> str:
    return (
        '<crx version="1.4.1" user="admin" workspace="crx.default">'
        '<request><param name="cmd" value="ls"/></request>'
        "<response><data><packages>"
        "<package><group>g</group><name>p</name><version>1.0</version></package>"
        "<package><group>g</group><name>q</name><version>2.0</version></package>"
        f'</packages></data><status code="{code}">{text}</status></response></crx>'
    )


def test_xml_package_list_ok() -> None:
    """Test that a 200/ok listing yields the packages subtree."""
    result = xml_package_list(Response(200, _listing("200", "ok")), SPEC, {})

    assert result.is_success() is True
    assert result.message == "All packages list retrieved successfully"
    assert result.data is not None
    assert result.data.tag == "packages"
    assert [p.findtext("name") for p in result.data.findall("package")] == ["p", "q"]


def test_xml_package_list_bytes_body() -> None:
    """Test that byte bodies are decoded before parsing."""
    result = xml_package_list(Response(200, _listing("200", "ok").encode("utf-8")), SPEC, {})
    assert result.is_success() is True


def test_xml_package_list_error_status() -> None:
    """Test that a non-ok status is a failure carrying the observed code and text."""
    result = xml_package_list(Response(200, _listing("500", "error")), SPEC, {})

    assert result.is_success() is False
    assert result.data is None
    assert result.message == "Unable to retrieve package list, getting status code 500 and status text error"


def test_xml_package_list_status_compared_as_text() -> None:
    """Test that the status text comparison is exact."""
    result = xml_package_list(Response(200, _listing("200", "OK")), SPEC, {})
    assert result.is_success() is False


def test_xml_package_list_unparseable() -> None:
    """Test that a malformed body is a failure Result, not an exception."""
    result = xml_package_list(Response(200, "<crx><response>"), SPEC, {})

    assert result.is_success() is False
    assert result.message == "Unable to retrieve package list, getting status code  and status text "
