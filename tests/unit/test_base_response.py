#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""统一响应模型单元测试"""

from server.api.v1.models.base_response import APIResponse


class TestAPIResponse:
    def test_ok(self):
        body = APIResponse.ok(data={"total": 0, "names": []}).model_dump()
        assert body["success"] is True
        assert body["code"] == 200
        assert body["data"] == {"total": 0, "names": []}
        assert body["error"] is None
        assert body["timestamp"]

    def test_fail(self):
        body = APIResponse.fail(error="姓氏必须为 1-2 个汉字").model_dump()
        assert body["success"] is False
        assert body["code"] == 400
        assert body["data"] is None
        assert body["error"] == "姓氏必须为 1-2 个汉字"

    def test_fail_custom_code(self):
        assert APIResponse.fail(error="内部错误", code=500).code == 500
