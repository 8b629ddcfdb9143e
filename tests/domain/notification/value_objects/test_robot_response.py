"""Tests for RobotResponse value object"""

from domain.notification.value_objects.robot_response import RobotResponse


class TestRobotResponseParse:
    """RobotResponse.parse() 测试"""

    def test_parse_success_response(self):
        """测试解析成功响应"""
        result = RobotResponse.parse(b'{"errcode":0,"errmsg":"ok"}')

        assert result == RobotResponse(errcode=0, errmsg="ok")
        assert result.is_success is True

    def test_parse_error_response(self):
        """测试解析错误响应"""
        result = RobotResponse.parse(b'{"errcode":300001,"errmsg":"token is not exist"}')

        assert result.errcode == 300001
        assert result.errmsg == "token is not exist"
        assert result.is_success is False

    def test_parse_capitalized_fields(self):
        """测试兼容首字母大写字段"""
        result = RobotResponse.parse(b'{"ErrCode":310000,"ErrMsg":"sign not match"}')

        assert result.errcode == 310000
        assert result.errmsg == "sign not match"

    def test_parse_missing_fields_defaults_to_zero(self):
        """测试缺少字段时为零值"""
        result = RobotResponse.parse(b"{}")

        assert result == RobotResponse()
        assert result.is_success is True

    def test_parse_non_json_returns_none(self):
        """测试非 JSON 响应返回 None"""
        assert RobotResponse.parse(b"<html>bad gateway</html>") is None

    def test_parse_non_object_returns_none(self):
        """测试 JSON 但不是对象时返回 None"""
        assert RobotResponse.parse(b"[1, 2]") is None

    def test_parse_empty_body_returns_none(self):
        """测试空响应体返回 None"""
        assert RobotResponse.parse(b"") is None

    def test_parse_non_numeric_errcode_returns_none(self):
        """测试 errcode 不是数字时返回 None"""
        assert RobotResponse.parse(b'{"errcode":"abc"}') is None


class TestRobotResponseFieldCasing:
    """RobotResponse.parse() 字段名大小写测试"""

    def test_parse_mixed_case_fields(self):
        """测试字段名大小写混用"""
        result = RobotResponse.parse(b'{"Errcode":310000,"ERRMSG":"sign not match"}')

        assert result == RobotResponse(errcode=310000, errmsg="sign not match")

    def test_parse_upper_case_errcode(self):
        """测试全大写 errcode"""
        result = RobotResponse.parse(b'{"ERRCODE":300001}')

        assert result.errcode == 300001
        assert result.errmsg == ""

    def test_parse_duplicate_keys_last_wins(self):
        """测试同一字段不同写法重复出现时以最后一次为准"""
        result = RobotResponse.parse(b'{"errcode":0,"ErrCode":300001}')

        assert result.errcode == 300001
        assert result.is_success is False

    def test_parse_ignores_unrelated_fields(self):
        """测试忽略无关字段"""
        result = RobotResponse.parse(b'{"errcode":0,"errmsg":"ok","requestId":"abc"}')

        assert result == RobotResponse(errcode=0, errmsg="ok")


class TestRobotResponseFieldTypes:
    """RobotResponse.parse() 字段类型测试"""

    def test_parse_string_errcode_returns_none(self):
        """测试 errcode 为数字字符串时返回 None"""
        assert RobotResponse.parse(b'{"errcode":"300001","errmsg":"x"}') is None

    def test_parse_float_errcode_returns_none(self):
        """测试 errcode 为小数时返回 None"""
        assert RobotResponse.parse(b'{"errcode":1.5}') is None

    def test_parse_integral_float_errcode_returns_none(self):
        """测试 errcode 为 1.0 这类小数写法时返回 None"""
        assert RobotResponse.parse(b'{"errcode":1.0}') is None

    def test_parse_boolean_errcode_returns_none(self):
        """测试 errcode 为布尔值时返回 None"""
        assert RobotResponse.parse(b'{"errcode":true}') is None

    def test_parse_null_errcode_defaults_to_zero(self):
        """测试 errcode 为 null 时取零值"""
        result = RobotResponse.parse(b'{"errcode":null,"errmsg":null}')

        assert result == RobotResponse()

    def test_parse_non_string_errmsg_returns_none(self):
        """测试 errmsg 不是字符串时返回 None"""
        assert RobotResponse.parse(b'{"errcode":0,"errmsg":123}') is None
