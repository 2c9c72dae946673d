import logging
from typing import List

from ..errors import ParseError
from ..models import NOT_RUNNING, ServiceRecord
from .shell import body_lines

logger = logging.getLogger(__name__)

def parse_service_line(line: str) -> ServiceRecord:
    # PID Status Label   -> label may itself contain spaces
    parts = line.split()
    if len(parts) < 3:
        raise ParseError(line)
    pid = NOT_RUNNING if parts[0] == "-" else parts[0]
    return ServiceRecord(pid=pid, status=parts[1], label=" ".join(parts[2:]))

def parse_service_list(text: str) -> List[ServiceRecord]:
    services: List[ServiceRecord] = []
    for line in body_lines(text):
        try:
            services.append(parse_service_line(line))
        except ParseError as e:
            logger.debug("service list: skipping %s", e)
    return services
