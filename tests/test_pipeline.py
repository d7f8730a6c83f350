import json
import os
import tempfile
from types import SimpleNamespace
from unittest import IsolatedAsyncioTestCase
from unittest.mock import AsyncMock, patch

from dirstore.config import settings
from dirstore.pipeline import deps
from dirstore.pipeline.errors import BadRequest, Conflict, NotFound, RoutingError, UnsupportedMediaType

JSON_UTF8 = {"content-type": "application/json; charset=utf-8"}


def _request(path, body=b"", headers=None):
    return SimpleNamespace(
        url=SimpleNamespace(path=path),
        headers=headers if headers is not None else JSON_UTF8,
        body=AsyncMock(return_value=body),
    )


class PipelineTests(IsolatedAsyncioTestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = self._tmp.name
        with open(os.path.join(self.root, "here.txt"), "w") as f:
            f.write("hello")
        self._patches = [
            patch.object(settings, "files_dir", self.root),
            patch.object(settings, "path_prefix", "/"),
        ]
        for p in self._patches:
            p.start()

    def tearDown(self):
        for p in self._patches:
            p.stop()
        self._tmp.cleanup()

    async def test_create_context_carries_location_and_content(self):
        req = _request("/new", json.dumps({"Content": "abc"}).encode())
        ctx = await deps.CREATE(req)
        self.assertEqual(ctx.location.abs_path, os.path.join(self.root, "new.txt"))
        self.assertFalse(ctx.location.is_directory_shaped)
        self.assertEqual(ctx.content.text, "abc")

    async def test_guard_runs_before_body_and_body_is_still_drained(self):
        req = _request("/here", b"not json", headers={"content-type": "text/plain"})
        with self.assertRaises(Conflict):
            await deps.CREATE(req)
        req.body.assert_awaited()

    async def test_decode_failures(self):
        with self.assertRaises(UnsupportedMediaType):
            await deps.MODIFY(_request("/here", b"{}", headers={"content-type": "application/json"}))
        with self.assertRaises(BadRequest):
            await deps.MODIFY(_request("/here", b""))
        req = _request("/here", json.dumps({"Content": "x", "Extra": 1}).encode())
        with self.assertRaises(BadRequest):
            await deps.MODIFY(req)
        req.body.assert_awaited()

    async def test_bodyless_operations_do_not_read_body(self):
        req = _request("/here")
        ctx = await deps.REMOVE(req)
        self.assertIsNone(ctx.content)
        req.body.assert_not_awaited()

    async def test_missing_file(self):
        with self.assertRaises(NotFound):
            await deps.REMOVE(_request("/absent"))
        with self.assertRaises(NotFound):
            await deps.MODIFY(_request("/absent", json.dumps({"Content": "x"}).encode()))

    async def test_retrieve_picks_guard_by_shape(self):
        ctx = await deps.RETRIEVE(_request("/"))
        self.assertTrue(ctx.location.is_directory_shaped)
        ctx = await deps.RETRIEVE(_request("/here"))
        self.assertFalse(ctx.location.is_directory_shaped)
        with self.assertRaises(NotFound) as err:
            await deps.RETRIEVE(_request("/nodir/"))
        self.assertEqual(err.exception.detail, "Folder does not exist")

    async def test_prefix_mismatch(self):
        with patch.object(settings, "path_prefix", "/api"):
            with self.assertRaises(RoutingError):
                await deps.RETRIEVE(_request("/here"))
            ctx = await deps.RETRIEVE(_request("/api/here"))
        self.assertEqual(ctx.location.abs_path, os.path.join(self.root, "here.txt"))
