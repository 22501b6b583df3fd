#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
起名接口请求模型 - 字段校验与领域请求转换
"""

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from core.data.constants import FiveElement
from core.models.naming_models import GenerationRequest

GENDERS = ('male', 'female', 'neutral')
STYLES = ('modern', 'classic', 'poetic')
SOURCES = ('poetry', 'classics', 'idioms', 'any')
MAX_ELEMENTS = 5


def _parse_birth_date(v):
    """生日格式 YYYY-MM-DD，空值视为未提供"""
    if v is None or v == '':
        return None
    if isinstance(v, date):
        return v
    try:
        return datetime.strptime(str(v), '%Y-%m-%d').date()
    except ValueError:
        raise ValueError('日期格式错误，应为 YYYY-MM-DD')


class BirthInfoMixin(BaseModel):
    """生辰公共字段"""
    birth_date: Optional[date] = Field(None, description="阳历生日，格式：YYYY-MM-DD", examples=["1990-12-23"])
    birth_hour: Optional[int] = Field(None, ge=0, le=23, description="出生小时 0-23，缺省按 0 点", examples=[8])

    @field_validator('birth_date', mode='before')
    @classmethod
    def validate_birth_date(cls, v):
        return _parse_birth_date(v)


class NameGenerateRequest(BirthInfoMixin):
    """起名请求模型"""
    surname: str = Field(..., min_length=1, max_length=2, description="姓氏（1-2 个汉字）", examples=["李"])
    gender: str = Field("neutral", description="性别倾向：male / female / neutral", examples=["male"])
    preferred_elements: List[str] = Field(default_factory=list, description="偏好五行，如 [\"水\", \"木\"]")
    avoid_elements: List[str] = Field(default_factory=list, description="回避五行")
    style: Optional[str] = Field(None, description="风格：modern / classic / poetic")
    source: Optional[str] = Field(None, description="出处：poetry / classics / idioms / any")
    character_count: int = Field(2, description="名字字数：1 或 2")
    max_results: int = Field(20, ge=1, le=50, description="返回数量 1-50")

    @field_validator('surname')
    @classmethod
    def validate_surname(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('姓氏不能为空')
        return v

    @field_validator('gender')
    @classmethod
    def validate_gender(cls, v):
        if v not in GENDERS:
            raise ValueError('性别必须为 male、female 或 neutral')
        return v

    @field_validator('preferred_elements', 'avoid_elements')
    @classmethod
    def validate_elements(cls, v):
        """五行去重后不超过 5 个，支持中文或英文名"""
        parsed = []
        for item in v:
            element = FiveElement.parse(item)
            if element.value in parsed:
                raise ValueError(f'五行重复: {element.value}')
            parsed.append(element.value)
        if len(parsed) > MAX_ELEMENTS:
            raise ValueError(f'五行最多 {MAX_ELEMENTS} 个')
        return parsed

    @field_validator('style')
    @classmethod
    def validate_style(cls, v):
        if v and v not in STYLES:
            raise ValueError('风格必须为 modern、classic 或 poetic')
        return v or None

    @field_validator('source')
    @classmethod
    def validate_source(cls, v):
        if v and v not in SOURCES:
            raise ValueError('出处必须为 poetry、classics、idioms 或 any')
        return v or None

    @field_validator('character_count')
    @classmethod
    def validate_character_count(cls, v):
        if v not in (1, 2):
            raise ValueError('名字字数必须为 1 或 2')
        return v

    def to_generation_request(self) -> GenerationRequest:
        return GenerationRequest(
            surname=self.surname,
            gender=self.gender,
            birth_date=self.birth_date,
            birth_hour=self.birth_hour,
            preferred_elements=tuple(FiveElement.parse(e) for e in self.preferred_elements),
            avoid_elements=tuple(FiveElement.parse(e) for e in self.avoid_elements),
            style=self.style,
            source=self.source,
            character_count=self.character_count,
            max_results=self.max_results,
        )


class NameAnalyzeRequest(BirthInfoMixin):
    """姓名分析请求模型"""
    full_name: str = Field(..., min_length=2, max_length=4, description="完整姓名", examples=["李明华"])

    @field_validator('full_name')
    @classmethod
    def validate_full_name(cls, v):
        v = v.strip()
        if len(v) < 2:
            raise ValueError('姓名至少 2 个字')
        return v
