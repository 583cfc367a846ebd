from typing import List

import numpy as np

from ..config.formatter_config import VersionFormatParams
from ..utils.formatter import render_version
from ..utils.logger import logger


class VersionFormatter:
    def __init__(self, params: VersionFormatParams = None):
        self.params = params if params is not None else VersionFormatParams()

        runtime_version = VersionFormatter.get_runtime_version()
        logger.fmt(f"Runtime: {runtime_version}")


    @classmethod
    def create(cls, **kwargs):
        logger.fmt("Creating VersionFormatter instance...")
        return cls(VersionFormatParams(**kwargs))


    @staticmethod
    def get_runtime_version():
        """
        Report the verfmt and NumPy versions.

        Returns:
            str: verfmt and NumPy version information
        """
        from .. import __version__ as verfmt_version

        result = [
            f"verfmt version: {verfmt_version}",
            f"NumPy version: {np.__version__}",
        ]
        return ", ".join(result)


    def format(self, v=None) -> str:
        """버전 값 하나를 표시 문자열로 변환"""
        return render_version(v, self.params.divisor, self.params.radix, self.params.separator)


    def format_many(self, values) -> List[str]:
        """배열 형태 입력 일괄 변환 (C order 로 평탄화)"""
        # tolist() 로 numpy scalar 를 파이썬 기본 타입으로 변환
        items = np.asarray(values).ravel().tolist()
        results = [self.format(v) for v in items]
        logger.debug(f"Formatted {len(results)} version values")
        return results
