# Copyright Contributors to the OpenVDB Project
# SPDX-License-Identifier: Apache-2.0
#

ANIMALS = (
    "aardvark",
    "albatross",
    "alligator",
    "alpaca",
    "anaconda",
    "anteater",
    "antelope",
    "armadillo",
    "baboon",
    "badger",
    "barracuda",
    "bat",
    "beaver",
    "bison",
    "boar",
    "bobcat",
    "buffalo",
    "bulldog",
    "butterfly",
    "buzzard",
    "camel",
    "capybara",
    "caracal",
    "caribou",
    "cassowary",
    "cat",
    "caterpillar",
    "chameleon",
    "cheetah",
    "chimpanzee",
    "chinchilla",
    "chipmunk",
    "cobra",
    "cockatoo",
    "condor",
    "cougar",
    "cow",
    "coyote",
    "crab",
    "crane",
    "crocodile",
    "crow",
    "dingo",
    "dodo",
    "dog",
    "dolphin",
    "donkey",
    "dormouse",
    "dove",
    "dragonfly",
    "duck",
    "eagle",
    "eel",
    "elephant",
    "elk",
    "emu",
    "falcon",
    "ferret",
    "finch",
    "flamingo",
    "fox",
    "frog",
    "gazelle",
    "gecko",
    "gerbil",
    "gibbon",
    "giraffe",
    "gnu",
    "goat",
    "goose",
    "gopher",
    "gorilla",
    "grasshopper",
    "grouse",
    "gull",
    "hamster",
    "hare",
    "hawk",
    "hedgehog",
    "heron",
    "hippo",
    "hornet",
    "horse",
    "hummingbird",
    "hyena",
    "ibis",
    "iguana",
    "impala",
    "jackal",
    "jaguar",
    "jellyfish",
    "kangaroo",
    "kingfisher",
    "kiwi",
    "koala",
    "kookaburra",
    "lemming",
    "lemur",
    "leopard",
    "lion",
    "lizard",
    "llama",
    "lobster",
    "lynx",
    "macaw",
    "magpie",
    "manatee",
    "mandrill",
    "marmot",
    "meerkat",
    "mink",
    "mole",
    "mongoose",
    "monkey",
    "moose",
    "mosquito",
    "moth",
    "mouse",
    "mule",
    "narwhal",
    "newt",
    "nightingale",
    "ocelot",
    "octopus",
    "okapi",
    "opossum",
    "orangutan",
    "orca",
    "ostrich",
    "otter",
    "owl",
    "ox",
    "oyster",
    "panda",
    "panther",
    "parrot",
    "peacock",
    "pelican",
    "penguin",
    "pheasant",
    "pig",
    "pigeon",
    "platypus",
    "porcupine",
    "porpoise",
    "puffin",
    "puma",
    "python",
    "quail",
    "rabbit",
    "raccoon",
    "ram",
    "rat",
    "raven",
    "reindeer",
    "rhino",
    "salamander",
    "salmon",
    "scorpion",
    "seahorse",
    "seal",
    "shark",
    "sheep",
    "shrimp",
    "skunk",
    "sloth",
    "snail",
    "snake",
    "sparrow",
    "spider",
    "squid",
    "squirrel",
    "starling",
    "stingray",
    "stork",
    "swan",
    "tapir",
    "tiger",
    "toad",
    "toucan",
    "trout",
    "turkey",
    "turtle",
    "viper",
    "vulture",
    "wallaby",
    "walrus",
    "wasp",
    "weasel",
    "whale",
    "wolf",
    "wolverine",
    "wombat",
    "woodpecker",
    "yak",
    "zebra",
)
