import json

import pytest

from kongadmin.client import Client, Response
from kongadmin.errors import APIError
from kongadmin.info import InfoService, convert
from kongadmin.models import Info, RuntimeConfiguration

INFORMATION = {
    "version": "2.3.3.2-enterprise-edition",
    "configuration": {
        "portal": True,
        "rbac": "on",
        "database": "postgres",
    },
}


def _info_service(status, payload, methods):
    def transport(method, url, headers, body):
        methods.append(method)
        return Response(status, json.dumps(payload).encode())

    return InfoService(Client("http://kong.example.com", transport))


def test_convert():
    expected = Info(
        version="2.3.3.2-enterprise-edition",
        configuration=RuntimeConfiguration(portal=True, rbac="on", database="postgres"),
    )
    actual = convert(INFORMATION, Info)
    assert actual == expected
    assert actual.configuration.is_in_memory() is False
    assert actual.configuration.is_rbac_enabled() is True


def test_convert_rejects_non_object():
    with pytest.raises(TypeError):
        convert(["x"], Info)


def test_info_service_get():
    methods = []
    info = _info_service(200, INFORMATION, methods).get()
    assert methods == ["GET"]
    assert info.version == "2.3.3.2-enterprise-edition"
    assert info.configuration.database == "postgres"


def test_info_service_error():
    with pytest.raises(APIError) as info:
        _info_service(500, {"message": "down"}, []).get()
    assert info.value.message == "down"