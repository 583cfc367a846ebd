import logging

# 커스텀 레벨 정의
FMT_LEVEL = 25
logging.addLevelName(FMT_LEVEL, 'VERFMT')

LOG_FORMAT = '[%(asctime)s] [%(levelname)s] %(message)s'
LOG_DATEFMT = '%H:%M:%S'

def fmt(self, message, *args, **kwargs):
    if self.isEnabledFor(FMT_LEVEL):
        self._log(FMT_LEVEL, message, args, **kwargs)

# Logger 클래스에 메서드 추가
logging.Logger.fmt = fmt


def setup_logging(level=logging.DEBUG):
    """루트 로거 설정. 라이브러리 import 시에는 호출하지 않음"""
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)


logger = logging.getLogger("verfmt")
logger.setLevel(logging.INFO)
logger.addHandler(logging.NullHandler())
