import unittest

from drivenodes.auth import DEFAULT_SCOPES, AuthInfo


class TestAuthInfo(unittest.TestCase):
    def test_auth_info_valid(self) -> None:
        info = AuthInfo(
            client_secrets_file="/tmp/client_secrets.json",
            token_file="/tmp/token.json",
        )
        self.assertEqual(info.client_secrets_file, "/tmp/client_secrets.json")
        self.assertEqual(info.token_file, "/tmp/token.json")
        self.assertEqual(info.scopes, DEFAULT_SCOPES)

    def test_scopes_stored_as_tuple(self) -> None:
        info = AuthInfo("secrets.json", "token.json", scopes=["clouddrive:read_all"])
        self.assertEqual(info.scopes, ("clouddrive:read_all",))

    def test_empty_paths_rejected(self) -> None:
        with self.assertRaises(ValueError):
            AuthInfo(client_secrets_file="", token_file="token.json")
        with self.assertRaises(ValueError):
            AuthInfo(client_secrets_file="secrets.json", token_file="  ")

    def test_scopes_validated(self) -> None:
        with self.assertRaises(TypeError):
            AuthInfo("secrets.json", "token.json", scopes="clouddrive:read_all")  # type: ignore[arg-type]
        with self.assertRaises(ValueError):
            AuthInfo("secrets.json", "token.json", scopes=())
        with self.assertRaises(ValueError):
            AuthInfo("secrets.json", "token.json", scopes=["ok", " "])


class TestAuthInfoFromEnv(unittest.TestCase):
    def test_from_env_reads_required_vars(self) -> None:
        info = AuthInfo.from_env(
            {
                "DRIVENODES_CLIENT_SECRETS": "/etc/drive/secrets.json",
                "DRIVENODES_TOKEN_FILE": "/var/cache/drive/token.json",
            }
        )
        self.assertEqual(info.client_secrets_file, "/etc/drive/secrets.json")
        self.assertEqual(info.token_file, "/var/cache/drive/token.json")
        self.assertEqual(info.scopes, DEFAULT_SCOPES)

    def test_from_env_parses_scopes(self) -> None:
        info = AuthInfo.from_env(
            {
                "DRIVENODES_CLIENT_SECRETS": "secrets.json",
                "DRIVENODES_TOKEN_FILE": "token.json",
                "DRIVENODES_SCOPES": " clouddrive:read_all, ,profile ",
            }
        )
        self.assertEqual(info.scopes, ("clouddrive:read_all", "profile"))

    def test_from_env_missing_var(self) -> None:
        with self.assertRaises(ValueError) as ctx:
            AuthInfo.from_env({"DRIVENODES_CLIENT_SECRETS": "secrets.json"})
        self.assertIn("DRIVENODES_TOKEN_FILE", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
