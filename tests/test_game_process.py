import unittest
from unittest import mock

try:
    import game_process
except ImportError:
    # pymem only imports on Windows
    game_process = None


class FakePymem:
    process_id = 4242


@unittest.skipIf(game_process is None, "pymem is not available")
class IsOpenTests(unittest.TestCase):
    def make_process(self, process_name):
        return game_process.GameProcess(FakePymem(), process_name, 0x140000000, 0x1657000)

    def running_process(self, name):
        proc = mock.Mock()
        proc.is_running.return_value = True
        proc.name.return_value = name
        return proc

    def test_name_match_ignores_case(self) -> None:
        process = self.make_process("sor4.exe")
        with mock.patch.object(game_process.psutil, "Process", return_value=self.running_process("SOR4.exe")):
            self.assertTrue(process.is_open())

    def test_other_process_reusing_pid(self) -> None:
        process = self.make_process("SOR4.exe")
        with mock.patch.object(game_process.psutil, "Process", return_value=self.running_process("notepad.exe")):
            self.assertFalse(process.is_open())

    def test_exited_process(self) -> None:
        process = self.make_process("SOR4.exe")
        error = game_process.psutil.NoSuchProcess(FakePymem.process_id)
        with mock.patch.object(game_process.psutil, "Process", side_effect=error):
            self.assertFalse(process.is_open())


if __name__ == "__main__":
    unittest.main()
