# This is "unmunching" script for MySpell dictionaries, based on wordforms:
# turning affix-compressed dictionary into plain list of all language's words. E.g. for Polish, in
# the dictionary we have "krasc/A" (base form + symbols of rule sets), and we can run this script:
#
#   python unmunch.py -d path/to/pl_PL -w krasc
#
# Which will produce this line:
#
#   krasc,krslem
#
# Running without -w will unmunch the entire dictionary. With --trie, instead of one line per word
# all the forms are printed one per line, sorted (as stored in the forms trie).
#

import logging
import sys
from optparse import OptionParser

from wordforms.myspell import Dictionary
from wordforms.myspell.consumers import FullDictionaryWriter, FormsTrieBuilder

parser = OptionParser()
parser.add_option("-d", "--dictionary", dest="dictionary", metavar='DICTIONARY',
                  help="dictionary path to unmunch (<path>.aff and <path>.dic should be present)")
parser.add_option("-w", "--word", dest="word", default=None, metavar='WORD',
                  help="singular word to unmunch (if absent, unmunch the whole dictionary)")
parser.add_option("-o", "--output", dest="output", default=None, metavar='FILE',
                  help="file to write the full dictionary to (in the dictionary's charset)")
parser.add_option("-t", "--trie", dest="trie", default=False, action='store_true',
                  help="print sorted list of all forms instead of one line per word")
parser.add_option("-k", "--keep-going", dest="keep_going", default=False, action='store_true',
                  help="skip words that can't be processed instead of stopping")
parser.add_option("-v", "--verbose", dest="verbose", default=False, action='store_true')

(options, args) = parser.parse_args()

logging.basicConfig(level=logging.DEBUG if options.verbose else logging.INFO, stream=sys.stderr)

if not options.dictionary:
    parser.error("dictionary path is required")

dictionary = Dictionary.from_files(options.dictionary)

if options.word:
    words = dictionary.dic.homonyms(options.word)
    print(f"Unmunching only words with base form {options.word}: {words}", file=sys.stderr)
    for word in words:
        print(','.join(dictionary.forms(word)))
elif options.trie:
    builder = FormsTrieBuilder()
    dictionary.process_all_forms(builder, break_on_exception=not options.keep_going)
    for form in builder.words():
        print(form)
elif options.output:
    dictionary.write_full_dictionary(options.output)
else:
    report = dictionary.process_all_forms(FullDictionaryWriter(sys.stdout),
                                          break_on_exception=not options.keep_going)
    print(f"{report.processed} words, {report.skipped} skipped", file=sys.stderr)
