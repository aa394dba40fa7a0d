#!/usr/bin/python3
import unittest

from prefstore.models import Format
from prefstore.constants import (
    LOG_BACKUP_COUNT,
    INI_ROOT_SECTION,
    CONFIG_FILE_STEM,
    LOG_MAX_BYTES,
    LOG_FILE_NAME
)

class ConstantsTests(unittest.TestCase):
    def test_default_file_names_share_stem(self):
        stems = {fmt.default_file_name.split(".")[0] for fmt in Format}
        self.assertEqual(stems, {CONFIG_FILE_STEM})

    def test_log_file_does_not_clash_with_config_files(self):
        self.assertNotIn(LOG_FILE_NAME, {fmt.default_file_name for fmt in Format})

    def test_log_rotation_limits_are_positive(self):
        self.assertGreater(LOG_MAX_BYTES, 0)
        self.assertGreater(LOG_BACKUP_COUNT, 0)

    def test_ini_root_section_name(self):
        self.assertEqual(INI_ROOT_SECTION, "DEFAULT")

if __name__ == "__main__":
    unittest.main()
