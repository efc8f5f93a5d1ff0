from path_scaffold.core import Scaffold, ScaffoldState
from path_scaffold.mixin import ScaffoldMixin


class TestScaffoldMixin(ScaffoldMixin):
    def teardown_method(self):
        self.remove_files()

    def test_lazy_files(self):
        assert self._files is None

        path = self.file("foo.txt")
        assert self._files is not None
        assert self.files is self._files
        assert path == self.files.root / "foo.txt"
        assert path.read_text(encoding="utf-8") == "contents of foo.txt"
        assert self.files.root.name.startswith("test_mixin_")

    def test_create_replaces_ambient(self):
        first = self.files

        def build(s):
            s.dir("bar", lambda s: (s.file("bar.txt"), s.dir("sub", lambda s: s.file("sub.txt"))))

        files = self.create(build)
        assert files is self.files
        assert files is not first
        assert (files.root / "bar" / "bar.txt").read_text(encoding="utf-8") == "contents of bar.txt"
        assert (files.root / "bar" / "sub" / "sub.txt").read_text(encoding="utf-8") == "contents of sub.txt"
        first.remove()

        subdir = self.dir("baz")
        assert subdir == files.root / "baz"
        assert subdir.is_dir()

    def test_block_state_does_not_leak(self):
        self.content = "breakfast"
        seen = []

        def stuff(s):
            seen.append(s)
            # 块内拿到的是 scaffold，而不是测试实例
            assert isinstance(s, Scaffold)
            assert not hasattr(s, "content")
            local = "lunch"
            seen.append(local)

        def other(s):
            assert "local" not in vars()
            seen.append(s)

        self.dir("stuff", stuff)
        self.dir("other", other)

        assert self.content == "breakfast"
        assert seen[0] is self.files
        assert seen[2] is self.files

    def test_remove_files(self):
        files = self.files
        self.remove_files()
        assert files.state is ScaffoldState.REMOVED
        assert not files.root.exists()
        assert self._files is None
        # 删除后再次访问会创建新的实例
        assert self.files is not files
