# Copyright (c) 2016, cipherlite developers
#
# See the LICENSE file for legal information regarding use of this file.

import unittest

from cipherlite.selection import CipherPreferenceList, CipherSelector, \
        createCipherPreferenceList, SuiteStatus
from cipherlite.ruleparser import parseCipherRules, RuleItem
from cipherlite.constants import CipherSuite as CS
from cipherlite.catalog import CIPHER_SUITES, getCipherSuite
from cipherlite.errors import EmptyCipherListError, CipherRuleParseError, \
        TLSConfigurationError


class TestCipherPreferenceList(unittest.TestCase):

    def test___init__(self):
        prefs = CipherPreferenceList([0x002F, 0x0035], [True, False])

        self.assertEqual(len(prefs), 2)
        self.assertEqual(list(prefs), [(0x002F, True), (0x0035, False)])

    def test___init___with_mismatched_lengths(self):
        with self.assertRaises(ValueError):
            CipherPreferenceList([0x002F], [])

    def test___eq__(self):
        self.assertEqual(CipherPreferenceList([0x002F], [False]),
                         CipherPreferenceList([0x002F], [False]))
        self.assertNotEqual(CipherPreferenceList([0x002F, 0x0035],
                                                 [True, False]),
                            CipherPreferenceList([0x002F, 0x0035],
                                                 [False, False]))
        self.assertNotEqual(CipherPreferenceList([0x002F], [False]),
                            [0x002F])

    def test___repr__(self):
        prefs = CipherPreferenceList([0x002F, 0xC02F], [True, False])

        self.assertEqual(repr(prefs),
                         "CipherPreferenceList(ciphers=[0x002f, 0xc02f], "
                         "inGroupFlags=[True, False])")

    def test_suites(self):
        prefs = CipherPreferenceList([0x002F], [False])

        self.assertEqual(prefs.suites, [getCipherSuite(0x002F)])

    def test_groups(self):
        prefs = CipherPreferenceList([1, 2, 3, 4], [True, False, True, False])

        self.assertEqual(prefs.groups(), [[1, 2], [3, 4]])

    def test_groups_with_empty(self):
        self.assertEqual(CipherPreferenceList([], []).groups(), [])


class TestCipherSelector(unittest.TestCase):

    def test___init__(self):
        selector = CipherSelector()

        self.assertEqual(selector.family, "tls")
        self.assertEqual(selector.activeIds(), [])

    def test___init___with_unknown_family(self):
        with self.assertRaises(ValueError):
            CipherSelector("quic")

    def test_result_with_nothing_selected(self):
        with self.assertRaises(EmptyCipherListError):
            CipherSelector().result()

    def test_apply_with_unknown_item(self):
        with self.assertRaises(TypeError):
            CipherSelector().apply(RuleItem(["ALL"]))

    def test_isExcluded(self):
        selector = CipherSelector()
        for item in parseCipherRules("!kRSA:ALL:kRSA:+kRSA"):
            selector.apply(item)

        self.assertTrue(selector.isExcluded(CS.TLS_RSA_WITH_AES_128_CBC_SHA))
        self.assertFalse(selector.isExcluded(
            CS.TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA))
        self.assertNotIn(CS.TLS_RSA_WITH_AES_128_CBC_SHA, selector.activeIds())

    def test_isExcluded_with_unknown_suite(self):
        with self.assertRaises(KeyError):
            CipherSelector().isExcluded(0x0005)

    def test_remove_keeps_suite_available(self):
        selector = CipherSelector()
        selector.select(frozenset([CS.TLS_RSA_WITH_AES_128_CBC_SHA]))
        selector.remove(frozenset([CS.TLS_RSA_WITH_AES_128_CBC_SHA]))

        self.assertEqual(selector.activeIds(), [])
        self.assertFalse(selector.isExcluded(CS.TLS_RSA_WITH_AES_128_CBC_SHA))

        selector.select(frozenset([CS.TLS_RSA_WITH_AES_128_CBC_SHA]))

        self.assertEqual(selector.activeIds(),
                         [CS.TLS_RSA_WITH_AES_128_CBC_SHA])

    def test_select_skips_active(self):
        selector = CipherSelector()
        selector.select(frozenset([CS.TLS_RSA_WITH_AES_128_CBC_SHA,
                                   CS.TLS_RSA_WITH_AES_256_CBC_SHA]))
        selector.select(frozenset([CS.TLS_RSA_WITH_AES_128_CBC_SHA]))

        self.assertEqual(selector.activeIds(),
                         [CS.TLS_RSA_WITH_AES_128_CBC_SHA,
                          CS.TLS_RSA_WITH_AES_256_CBC_SHA])

    def test_selectGroup_with_no_matches(self):
        selector = CipherSelector()
        selector.selectGroup([frozenset(), frozenset()])

        self.assertEqual(selector.activeIds(), [])


class TestCreateCipherPreferenceList(unittest.TestCase):

    def assertRules(self, rules, expected):
        prefs = createCipherPreferenceList(rules)
        self.assertEqual(list(prefs), expected)

    def test_individual_ciphers(self):
        self.assertRules(
            "ECDHE-ECDSA-CHACHA20-POLY1305:"
            "ECDHE-RSA-CHACHA20-POLY1305:"
            "ECDHE-ECDSA-AES128-GCM-SHA256:"
            "ECDHE-RSA-AES128-GCM-SHA256",
            [(CS.TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_SHA256, False),
             (CS.TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_OLD, False),
             (CS.TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_SHA256, False),
             (CS.TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_OLD, False),
             (CS.TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256, False),
             (CS.TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256, False)])

    def test_add_moves_to_end(self):
        self.assertRules(
            "ECDHE-ECDSA-CHACHA20-POLY1305:"
            "ECDHE-RSA-CHACHA20-POLY1305:"
            "ECDHE-ECDSA-AES128-GCM-SHA256:"
            "ECDHE-RSA-AES128-GCM-SHA256:"
            "+aRSA",
            [(CS.TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_SHA256, False),
             (CS.TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_OLD, False),
             (CS.TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256, False),
             (CS.TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_SHA256, False),
             (CS.TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_OLD, False),
             (CS.TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256, False)])

    def test_add_keeps_selected_set(self):
        prefs = createCipherPreferenceList("ALL")
        reordered = createCipherPreferenceList("ALL:+kRSA")

        self.assertEqual(set(prefs.ciphers), set(reordered.ciphers))
        self.assertNotEqual(prefs.ciphers, reordered.ciphers)
        self.assertEqual(reordered.ciphers[-1],
                         CS.TLS_RSA_WITH_3DES_EDE_CBC_SHA)

    def test_add_with_inactive_suites(self):
        self.assertRules("AES128-SHA:+kECDHE",
                         [(CS.TLS_RSA_WITH_AES_128_CBC_SHA, False)])

    def test_delete_banishes(self):
        self.assertRules(
            "!aRSA:"
            "ECDHE-ECDSA-CHACHA20-POLY1305:"
            "ECDHE-RSA-CHACHA20-POLY1305:"
            "ECDHE-ECDSA-AES128-GCM-SHA256:"
            "ECDHE-RSA-AES128-GCM-SHA256",
            [(CS.TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_SHA256, False),
             (CS.TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_OLD, False),
             (CS.TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256, False)])

    def test_compound(self):
        self.assertRules("kRSA+AESGCM+AES128",
                         [(CS.TLS_RSA_WITH_AES_128_GCM_SHA256, False)])

    def test_remove_preserves_order(self):
        self.assertRules(
            "ALL:-kECDHE:-kDHE:-kRSA:-ALL:"
            "AESGCM+AES128+aRSA",
            [(CS.TLS_RSA_WITH_AES_128_GCM_SHA256, False),
             (CS.TLS_DHE_RSA_WITH_AES_128_GCM_SHA256, False),
             (CS.TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256, False)])

    def test_remove_most_recent_first(self):
        prefs = createCipherPreferenceList(
            "AES128-SHA:AES256-SHA:-AES256-SHA:-AES128-SHA:AES")

        self.assertEqual(prefs.ciphers[:3],
                         [CS.TLS_RSA_WITH_AES_128_CBC_SHA,
                          CS.TLS_RSA_WITH_AES_256_CBC_SHA,
                          CS.TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256])

    def test_unknown_selectors(self):
        self.assertRules(
            "ECDHE-ECDSA-CHACHA20-POLY1305:"
            "ECDHE-RSA-CHACHA20-POLY1305:"
            "ECDHE-ECDSA-AES128-GCM-SHA256:"
            "ECDHE-RSA-AES128-GCM-SHA256:"
            "BOGUS1:-BOGUS2:+BOGUS3:!BOGUS4",
            [(CS.TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_SHA256, False),
             (CS.TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_OLD, False),
             (CS.TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_SHA256, False),
             (CS.TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_OLD, False),
             (CS.TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256, False),
             (CS.TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256, False)])

    def test_groups(self):
        self.assertRules(
            "[ECDHE-ECDSA-CHACHA20-POLY1305|ECDHE-ECDSA-AES128-GCM-SHA256]:"
            "[ECDHE-RSA-CHACHA20-POLY1305]:"
            "ECDHE-RSA-AES128-GCM-SHA256",
            [(CS.TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_SHA256, True),
             (CS.TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_OLD, True),
             (CS.TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256, False),
             (CS.TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_SHA256, True),
             (CS.TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_OLD, False),
             (CS.TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256, False)])

    def test_group_with_already_selected_suite(self):
        self.assertRules("AES128-SHA:[AES128-SHA|AES256-SHA]",
                         [(CS.TLS_RSA_WITH_AES_128_CBC_SHA, False),
                          (CS.TLS_RSA_WITH_AES_256_CBC_SHA, False)])

    def test_group_with_overlapping_names(self):
        prefs = createCipherPreferenceList("[AES128-SHA|kRSA]")

        self.assertEqual(prefs.ciphers[0], CS.TLS_RSA_WITH_AES_128_CBC_SHA)
        self.assertEqual(len(prefs.ciphers), len(set(prefs.ciphers)))
        self.assertEqual(prefs.inGroupFlags,
                         [True] * (len(prefs) - 1) + [False])

    def test_group_with_unknown_names(self):
        self.assertRules("[BOGUS]:AES128-SHA",
                         [(CS.TLS_RSA_WITH_AES_128_CBC_SHA, False)])

    def test_strength(self):
        self.assertRules(
            "!kEDH:!AESGCM:!3DES:!SHA256:!MD5:!SHA384:"
            "ALL:-CHACHA20:-AES256:-AES128:-ALL:"
            "kECDHE:@STRENGTH:-ALL:"
            "aRSA",
            [(CS.TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA, False),
             (CS.TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_SHA256, False),
             (CS.TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_OLD, False),
             (CS.TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA, False),
             (CS.TLS_RSA_WITH_AES_128_CBC_SHA, False),
             (CS.TLS_RSA_WITH_AES_256_CBC_SHA, False)])

    def test_strength_sorts_all(self):
        prefs = createCipherPreferenceList("ALL:@STRENGTH")
        strengths = [suite.strengthBits for suite in prefs.suites]

        self.assertEqual(strengths, sorted(strengths, reverse=True))
        self.assertEqual(prefs.ciphers[0],
                         CS.TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_SHA256)
        self.assertEqual(prefs.ciphers[-1], CS.TLS_RSA_WITH_3DES_EDE_CBC_SHA)

    def test_strength_is_idempotent(self):
        self.assertEqual(createCipherPreferenceList("ALL:@STRENGTH"),
                         createCipherPreferenceList("ALL:@STRENGTH:@STRENGTH"))

    def test_exact_names_in_compound(self):
        self.assertRules(
            "ECDHE-ECDSA-AES128-GCM-SHA256:"
            "ECDHE-RSA-AES128-GCM-SHA256:"
            "!ECDHE-RSA-AES128-GCM-SHA256+RSA:"
            "!ECDSA+ECDHE-ECDSA-AES128-GCM-SHA256",
            [(CS.TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256, False),
             (CS.TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256, False)])

    def test_shared_names_in_compound(self):
        self.assertRules(
            "ECDHE-ECDSA-CHACHA20-POLY1305:"
            "ECDHE-RSA-CHACHA20-POLY1305:"
            "!ECDHE-RSA-CHACHA20-POLY1305+RSA:"
            "!ECDSA+ECDHE-ECDSA-CHACHA20-POLY1305",
            [(CS.TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_SHA256, False),
             (CS.TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_OLD, False),
             (CS.TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_SHA256, False),
             (CS.TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_OLD, False)])

    def test_SSLv3(self):
        self.assertRules("AES128-SHA:AES128-SHA256:!SSLv3",
                         [(CS.TLS_RSA_WITH_AES_128_CBC_SHA256, False)])

    def test_TLSv1_2(self):
        self.assertRules("AES128-SHA:AES128-SHA256:!TLSv1.2",
                         [(CS.TLS_RSA_WITH_AES_128_CBC_SHA, False)])

    def test_version_aliases_intersection(self):
        self.assertRules("AES128-SHA:AES128-SHA256:!TLSv1.2+SSLv3",
                         [(CS.TLS_RSA_WITH_AES_128_CBC_SHA, False),
                          (CS.TLS_RSA_WITH_AES_128_CBC_SHA256, False)])

    def test_ALL_in_catalog_order(self):
        prefs = createCipherPreferenceList("ALL")

        self.assertEqual(prefs.ciphers,
                         [suite.id for suite in CIPHER_SUITES
                          if not suite.isNull()])
        self.assertFalse(any(prefs.inGroupFlags))

    def test_eNULL(self):
        self.assertRules("eNULL", [(CS.TLS_RSA_WITH_NULL_SHA, False)])

    def test_ALL_with_eNULL(self):
        prefs = createCipherPreferenceList("ALL:eNULL")

        self.assertEqual(len(prefs), len(CIPHER_SUITES))
        self.assertEqual(prefs.ciphers[-1], CS.TLS_RSA_WITH_NULL_SHA)

    def test_must_not_include_null(self):
        for rules in ["ALL", "DEFAULT", "ALL:!eNULL", "ALL:!NULL", "HIGH",
                      "FIPS", "SHA", "SHA1", "RSA", "SSLv3", "TLSv1",
                      "TLSv1.2"]:
            prefs = createCipherPreferenceList(rules)
            for suite in prefs.suites:
                self.assertFalse(suite.isNull(), rules)

    def test_bad_rules(self):
        for rules in [
                "[ECDHE-RSA-CHACHA20-POLY1305|ECDHE-RSA-AES128-GCM-SHA256",
                "RSA]",
                "[[RSA]]",
                "[+RSA]",
                "@BOGUS",
                "?BAR",
                "[ECDHE-RSA-CHACHA20-POLY1305|ECDHE-RSA-AES128-GCM-SHA256]:"
                "+FOO",
                "[ECDHE-RSA-CHACHA20-POLY1305|ECDHE-RSA-AES128-GCM-SHA256]:"
                "!FOO",
                "[ECDHE-RSA-CHACHA20-POLY1305|ECDHE-RSA-AES128-GCM-SHA256]:"
                "-FOO",
                "[ECDHE-RSA-CHACHA20-POLY1305|ECDHE-RSA-AES128-GCM-SHA256]:"
                "@STRENGTH",
                "+"]:
            with self.assertRaises(CipherRuleParseError):
                createCipherPreferenceList(rules)

    def test_empty_results(self):
        for rules in ["", "BOGUS", "COMPLEMENTOFDEFAULT", "COMPLEMENTOFALL",
                      "ALL:-ALL", "ALL:!ALL", "MD5"]:
            with self.assertRaises(EmptyCipherListError):
                createCipherPreferenceList(rules)

    def test_errors_are_value_errors(self):
        for rules in ["", "+", "BOGUS"]:
            with self.assertRaises(ValueError):
                createCipherPreferenceList(rules)
            with self.assertRaises(TLSConfigurationError):
                createCipherPreferenceList(rules)

    def test_unknown_family(self):
        with self.assertRaises(ValueError):
            createCipherPreferenceList("ALL", "quic")

    def test_dtls_version_aliases(self):
        with self.assertRaises(EmptyCipherListError):
            createCipherPreferenceList("SSLv3", "dtls")
        with self.assertRaises(EmptyCipherListError):
            createCipherPreferenceList("TLSv1.2", "dtls")

    def test_dtls_version_aliases_in_delete(self):
        self.assertEqual(createCipherPreferenceList("ALL:!TLSv1.2", "dtls"),
                         createCipherPreferenceList("ALL", "dtls"))

    def test_dtls_exact_names(self):
        prefs = createCipherPreferenceList("AES128-SHA", "dtls")

        self.assertEqual(prefs.ciphers, [CS.TLS_RSA_WITH_AES_128_CBC_SHA])

    def test_describe(self):
        prefs = createCipherPreferenceList(
            "[ECDHE-ECDSA-CHACHA20-POLY1305|ECDHE-ECDSA-AES128-GCM-SHA256]:"
            "[ECDHE-RSA-CHACHA20-POLY1305]:"
            "ECDHE-RSA-AES128-GCM-SHA256")

        self.assertEqual(prefs.describe(),
                         "[\n"
                         "  ECDHE-ECDSA-CHACHA20-POLY1305\n"
                         "  ECDHE-ECDSA-CHACHA20-POLY1305-OLD\n"
                         "  ECDHE-ECDSA-AES128-GCM-SHA256\n"
                         "]\n"
                         "[\n"
                         "  ECDHE-RSA-CHACHA20-POLY1305\n"
                         "  ECDHE-RSA-CHACHA20-POLY1305-OLD\n"
                         "]\n"
                         "ECDHE-RSA-AES128-GCM-SHA256")

    def test_groups_split(self):
        prefs = createCipherPreferenceList(
            "[ECDHE-ECDSA-CHACHA20-POLY1305|ECDHE-ECDSA-AES128-GCM-SHA256]:"
            "AES128-SHA")

        self.assertEqual(prefs.groups(),
                         [[CS.TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_SHA256,
                           CS.TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_OLD,
                           CS.TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256],
                          [CS.TLS_RSA_WITH_AES_128_CBC_SHA]])


class TestSuiteStatus(unittest.TestCase):

    def test_toStr(self):
        self.assertEqual(SuiteStatus.toStr(SuiteStatus.excluded), "excluded")


if __name__ == '__main__':
    unittest.main()
