from loguru import logger

from aoc2022.core.log import setup_logger


def test_file_sink_receives_messages(tmp_path):
    log = setup_logger("DEBUG", log_dir=str(tmp_path / "logs"))
    log.debug("climbing from {}", (0, 0))
    logger.remove()  # closes the file sink

    files = list((tmp_path / "logs").glob("aoc2022_*.log"))
    assert len(files) == 1
    assert "climbing from (0, 0)" in files[0].read_text(encoding="utf-8")
