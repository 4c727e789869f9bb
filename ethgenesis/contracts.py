"""
Pre-deployed permissioning contracts for the IBFT2 genesis.

The bytecode and storage values below are copied verbatim from the compiled
account and node ingress contracts. They are opaque payloads: nothing in this
package parses or regenerates them.
"""

ACCOUNT_INGRESS_ADDRESS = "0x0000000000000000000000000000000000008888"
NODE_INGRESS_ADDRESS = "0x0000000000000000000000000000000000009999"

# Storage slot keys written by both ingress contracts.
RULES_SLOT = "0x0000000000000000000000000000000000000000000000000000000000000000"
ADMINISTRATION_SLOT = "0x0000000000000000000000000000000000000000000000000000000000000001"
VERSION_SLOT = "0x0000000000000000000000000000000000000000000000000000000000000004"

# "rules" and "administration", left aligned in a 32 byte word.
RULES_CONTRACT_NAME = "0x72756c6573000000000000000000000000000000000000000000000000000000"
ADMINISTRATION_CONTRACT_NAME = "0x61646d696e697374726174696f6e000000000000000000000000000000000000"
CONTRACT_VERSION = "0x0f4240"

ACCOUNT_INGRESS_CODE = (
    "0x608060405234801561001057600080fd5b506004361061009e5760003560e01c806393"
    "6421d511610066578063936421d5146101ca578063a43e04d8146102fb578063de8fa431"
    "14610341578063e001f8411461035f578063fe9fbb80146103c55761009e565b80630d20"
    "20dd146100a357806310d9042e1461011157806311601306146101705780631e7c27cb14"
    "61018e5780638aa10435146101ac575b600080fd5b6100cf600480360360208110156100"
    "b957600080fd5b8101908080359060200190929190505050610421565b604051808273ff"
    "ffffffffffffffffffffffffffffffffffffff1673ffffffffffffffffffffffffffffff"
    "ffffffffff16815260200191505060405180910390f35b6101196104d6565b6040518080"
    "602001828103825283818151815260200191508051906020019060200280838360005b83"
    "81101561015c578082015181840152602081019050610141565b50505050905001925050"
    "5060405180910390f35b61017861052e565b604051808281526020019150506040518091"
    "0390f35b610196610534565b6040518082815260200191505060405180910390f35b6101"
    "b461053a565b6040518082815260200191505060405180910390f35b6102e16004803603"
    "60c08110156101e057600080fd5b81019080803573ffffffffffffffffffffffffffffff"
    "ffffffffff169060200190929190803573ffffffffffffffffffffffffffffffffffffff"
    "ff1690602001909291908035906020019092919080359060200190929190803590602001"
    "909291908035906020019064010000000081111561025b57600080fd5b82018360208201"
    "111561026d57600080fd5b80359060200191846001830284011164010000000083111715"
    "61028f57600080fd5b91908080601f016020809104026020016040519081016040528093"
    "929190818152602001838380828437600081840152601f19601f82011690508083019250"
    "5050505050509192919290505050610544565b6040518082151515158152602001915050"
    "60405180910390f35b6103276004803603602081101561031157600080fd5b8101908080"
    "35906020019092919050505061073f565b60405180821515151581526020019150506040"
    "5180910390f35b610349610a1e565b6040518082815260200191505060405180910390f3"
    "5b6103ab6004803603604081101561037557600080fd5b81019080803590602001909291"
    "90803573ffffffffffffffffffffffffffffffffffffffff169060200190929190505050"
    "610a2b565b604051808215151515815260200191505060405180910390f35b6104076004"
    "80360360208110156103db57600080fd5b81019080803573ffffffffffffffffffffffff"
    "ffffffffffffffff169060200190929190505050610caf565b6040518082151515158152"
    "60200191505060405180910390f35b60008060001b821161049b576040517f08c379a000"
    "000000000000000000000000000000000000000000000000000000815260040180806020"
    "01828103825260208152602001807f436f6e7472616374206e616d65206d757374206e6f"
    "7420626520656d7074792e81525060200191505060405180910390fd5b60026000838152"
    "60200190815260200160002060009054906101000a900473ffffffffffffffffffffffff"
    "ffffffffffffffff169050919050565b6060600380548060200260200160405190810160"
    "405280929190818152602001828054801561052457602002820191906000526020600020"
    "905b815481526020019060010190808311610510575b5050505050905090565b60005481"
    "565b60015481565b6000600554905090565b60008073ffffffffffffffffffffffffffff"
    "ffffffffffff16610568600054610421565b73ffffffffffffffffffffffffffffffffff"
    "ffffff16141561058d5760019050610735565b6002600080548152602001908152602001"
    "60002060009054906101000a900473ffffffffffffffffffffffffffffffffffffffff16"
    "73ffffffffffffffffffffffffffffffffffffffff1663936421d5888888888888604051"
    "8763ffffffff1660e01b8152600401808773ffffffffffffffffffffffffffffffffffff"
    "ffff1673ffffffffffffffffffffffffffffffffffffffff1681526020018673ffffffff"
    "ffffffffffffffffffffffffffffffff1673ffffffffffffffffffffffffffffffffffff"
    "ffff16815260200185815260200184815260200183815260200180602001828103825283"
    "818151815260200191508051906020019080838360005b838110156106a8578082015181"
    "84015260208101905061068d565b50505050905090810190601f1680156106d557808203"
    "80516001836020036101000a031916815260200191505b50975050505050505050602060"
    "40518083038186803b1580156106f757600080fd5b505afa15801561070b573d6000803e"
    "3d6000fd5b505050506040513d602081101561072157600080fd5b810190808051906020"
    "019092919050505090505b9695505050505050565b60008060001b82116107b957604051"
    "7f08c379a000000000000000000000000000000000000000000000000000000000815260"
    "04018080602001828103825260208152602001807f436f6e7472616374206e616d65206d"
    "757374206e6f7420626520656d7074792e81525060200191505060405180910390fd5b60"
    "0060038054905011610817576040517f08c379a000000000000000000000000000000000"
    "000000000000000000000000815260040180806020018281038252604781526020018061"
    "0e446047913960600191505060405180910390fd5b61082033610caf565b610875576040"
    "517f08c379a0000000000000000000000000000000000000000000000000000000008152"
    "60040180806020018281038252602b815260200180610e19602b91396040019150506040"
    "5180910390fd5b6000600460008481526020019081526020016000205490506000811180"
    "156108a257506003805490508111155b15610a1357600380549050811461091057600060"
    "03600160038054905003815481106108ca57fe5b90600052602060002001549050806003"
    "60018403815481106108e857fe5b90600052602060002001819055508160046000838152"
    "60200190815260200160002081905550505b600380548061091b57fe5b60019003818190"
    "600052602060002001600090559055600060046000858152602001908152602001600020"
    "8190555060006002600085815260200190815260200160002060006101000a81548173ff"
    "ffffffffffffffffffffffffffffffffffffff021916908373ffffffffffffffffffffff"
    "ffffffffffffffffff1602179055507fe3d908a1f6d2467f8e7c8198f30125843211345e"
    "edb763beb4cdfb7fe728a5af600084604051808373ffffffffffffffffffffffffffffff"
    "ffffffffff1673ffffffffffffffffffffffffffffffffffffffff168152602001828152"
    "6020019250505060405180910390a16001915050610a19565b60009150505b919050565b"
    "6000600380549050905090565b60008060001b8311610aa5576040517f08c379a0000000"
    "000000000000000000000000000000000000000000000000008152600401808060200182"
    "8103825260208152602001807f436f6e7472616374206e616d65206d757374206e6f7420"
    "626520656d7074792e81525060200191505060405180910390fd5b600073ffffffffffff"
    "ffffffffffffffffffffffffffff168273ffffffffffffffffffffffffffffffffffffff"
    "ff161415610b2b576040517f08c379a00000000000000000000000000000000000000000"
    "00000000000000008152600401808060200182810382526022815260200180610e8b6022"
    "913960400191505060405180910390fd5b610b3433610caf565b610b89576040517f08c3"
    "79a000000000000000000000000000000000000000000000000000000000815260040180"
    "806020018281038252602b815260200180610e19602b9139604001915050604051809103"
    "90fd5b600060046000858152602001908152602001600020541415610be8576003839080"
    "600181540180825580915050906001820390600052602060002001600090919290919091"
    "505560046000858152602001908152602001600020819055505b81600260008581526020"
    "0190815260200160002060006101000a81548173ffffffffffffffffffffffffffffffff"
    "ffffffff021916908373ffffffffffffffffffffffffffffffffffffffff160217905550"
    "7fe3d908a1f6d2467f8e7c8198f30125843211345eedb763beb4cdfb7fe728a5af828460"
    "4051808373ffffffffffffffffffffffffffffffffffffffff1673ffffffffffffffffff"
    "ffffffffffffffffffffff1681526020018281526020019250505060405180910390a160"
    "01905092915050565b60008073ffffffffffffffffffffffffffffffffffffffff166002"
    "6000600154815260200190815260200160002060009054906101000a900473ffffffffff"
    "ffffffffffffffffffffffffffffff1673ffffffffffffffffffffffffffffffffffffff"
    "ff161415610d235760019050610e13565b60026000600154815260200190815260200160"
    "002060009054906101000a900473ffffffffffffffffffffffffffffffffffffffff1673"
    "ffffffffffffffffffffffffffffffffffffffff1663fe9fbb80836040518263ffffffff"
    "1660e01b8152600401808273ffffffffffffffffffffffffffffffffffffffff1673ffff"
    "ffffffffffffffffffffffffffffffffffff168152602001915050602060405180830381"
    "86803b158015610dd557600080fd5b505afa158015610de9573d6000803e3d6000fd5b50"
    "5050506040513d6020811015610dff57600080fd5b810190808051906020019092919050"
    "505090505b91905056fe4e6f7420617574686f72697a656420746f207570646174652063"
    "6f6e74726163742072656769737472792e4d7573742068617665206174206c6561737420"
    "6f6e65207265676973746572656420636f6e747261637420746f20657865637574652064"
    "656c657465206f7065726174696f6e2e436f6e74726163742061646472657373206d7573"
    "74206e6f74206265207a65726f2ea265627a7a7230582041609b4b53a670d9d29d1c024d"
    "d9467b05a85c59786466daf08dcc1f75f8f6be64736f6c63430005090032"
)


NODE_INGRESS_CODE = (
    "0x608060405234801561001057600080fd5b50600436106100885760003560e01c8063a4"
    "3e04d81161005b578063a43e04d814610196578063de8fa431146101dc578063e001f841"
    "146101fa578063fe9fbb801461026057610088565b80630d2020dd1461008d57806310d9"
    "042e146100fb578063116013061461015a5780631e7c27cb14610178575b600080fd5b61"
    "00b9600480360360208110156100a357600080fd5b810190808035906020019092919050"
    "50506102bc565b604051808273ffffffffffffffffffffffffffffffffffffffff1673ff"
    "ffffffffffffffffffffffffffffffffffffff16815260200191505060405180910390f3"
    "5b610103610371565b604051808060200182810382528381815181526020019150805190"
    "6020019060200280838360005b8381101561014657808201518184015260208101905061"
    "012b565b505050509050019250505060405180910390f35b6101626103c9565b60405180"
    "82815260200191505060405180910390f35b6101806103cf565b60405180828152602001"
    "91505060405180910390f35b6101c2600480360360208110156101ac57600080fd5b8101"
    "9080803590602001909291905050506103d5565b60405180821515151581526020019150"
    "5060405180910390f35b6101e46106b4565b604051808281526020019150506040518091"
    "0390f35b6102466004803603604081101561021057600080fd5b81019080803590602001"
    "90929190803573ffffffffffffffffffffffffffffffffffffffff169060200190929190"
    "5050506106c1565b604051808215151515815260200191505060405180910390f35b6102"
    "a26004803603602081101561027657600080fd5b81019080803573ffffffffffffffffff"
    "ffffffffffffffffffffff169060200190929190505050610945565b6040518082151515"
    "15815260200191505060405180910390f35b60008060001b8211610336576040517f08c3"
    "79a000000000000000000000000000000000000000000000000000000000815260040180"
    "80602001828103825260208152602001807f436f6e7472616374206e616d65206d757374"
    "206e6f7420626520656d7074792e81525060200191505060405180910390fd5b60026000"
    "83815260200190815260200160002060009054906101000a900473ffffffffffffffffff"
    "ffffffffffffffffffffff169050919050565b6060600380548060200260200160405190"
    "81016040528092919081815260200182805480156103bf57602002820191906000526020"
    "600020905b8154815260200190600101908083116103ab575b5050505050905090565b60"
    "005481565b60015481565b60008060001b821161044f576040517f08c379a00000000000"
    "000000000000000000000000000000000000000000000081526004018080602001828103"
    "825260208152602001807f436f6e7472616374206e616d65206d757374206e6f74206265"
    "20656d7074792e81525060200191505060405180910390fd5b6000600380549050116104"
    "ad576040517f08c379a00000000000000000000000000000000000000000000000000000"
    "00008152600401808060200182810382526047815260200180610ada6047913960600191"
    "505060405180910390fd5b6104b633610945565b61050b576040517f08c379a000000000"
    "000000000000000000000000000000000000000000000000815260040180806020018281"
    "038252602b815260200180610aaf602b913960400191505060405180910390fd5b600060"
    "046000848152602001908152602001600020549050600081118015610538575060038054"
    "90508111155b156106a95760038054905081146105a65760006003600160038054905003"
    "8154811061056057fe5b9060005260206000200154905080600360018403815481106105"
    "7e57fe5b9060005260206000200181905550816004600083815260200190815260200160"
    "002081905550505b60038054806105b157fe5b6001900381819060005260206000200160"
    "009055905560006004600085815260200190815260200160002081905550600060026000"
    "85815260200190815260200160002060006101000a81548173ffffffffffffffffffffff"
    "ffffffffffffffffff021916908373ffffffffffffffffffffffffffffffffffffffff16"
    "02179055507fe3d908a1f6d2467f8e7c8198f30125843211345eedb763beb4cdfb7fe728"
    "a5af600084604051808373ffffffffffffffffffffffffffffffffffffffff1673ffffff"
    "ffffffffffffffffffffffffffffffffff16815260200182815260200192505050604051"
    "80910390a160019150506106af565b60009150505b919050565b60006003805490509050"
    "90565b60008060001b831161073b576040517f08c379a000000000000000000000000000"
    "000000000000000000000000000000815260040180806020018281038252602081526020"
    "01807f436f6e7472616374206e616d65206d757374206e6f7420626520656d7074792e81"
    "525060200191505060405180910390fd5b600073ffffffffffffffffffffffffffffffff"
    "ffffffff168273ffffffffffffffffffffffffffffffffffffffff1614156107c1576040"
    "517f08c379a0000000000000000000000000000000000000000000000000000000008152"
    "600401808060200182810382526022815260200180610b21602291396040019150506040"
    "5180910390fd5b6107ca33610945565b61081f576040517f08c379a00000000000000000"
    "000000000000000000000000000000000000000081526004018080602001828103825260"
    "2b815260200180610aaf602b913960400191505060405180910390fd5b60006004600085"
    "815260200190815260200160002054141561087e57600383908060018154018082558091"
    "505090600182039060005260206000200160009091929091909150556004600085815260"
    "2001908152602001600020819055505b8160026000858152602001908152602001600020"
    "60006101000a81548173ffffffffffffffffffffffffffffffffffffffff021916908373"
    "ffffffffffffffffffffffffffffffffffffffff1602179055507fe3d908a1f6d2467f8e"
    "7c8198f30125843211345eedb763beb4cdfb7fe728a5af8284604051808373ffffffffff"
    "ffffffffffffffffffffffffffffff1673ffffffffffffffffffffffffffffffffffffff"
    "ff1681526020018281526020019250505060405180910390a16001905092915050565b60"
    "008073ffffffffffffffffffffffffffffffffffffffff16600260006001548152602001"
    "90815260200160002060009054906101000a900473ffffffffffffffffffffffffffffff"
    "ffffffffff1673ffffffffffffffffffffffffffffffffffffffff1614156109b9576001"
    "9050610aa9565b6002600060015481526020019081526020016000206000905490610100"
    "0a900473ffffffffffffffffffffffffffffffffffffffff1673ffffffffffffffffffff"
    "ffffffffffffffffffff1663fe9fbb80836040518263ffffffff1660e01b815260040180"
    "8273ffffffffffffffffffffffffffffffffffffffff1673ffffffffffffffffffffffff"
    "ffffffffffffffff16815260200191505060206040518083038186803b158015610a6b57"
    "600080fd5b505afa158015610a7f573d6000803e3d6000fd5b505050506040513d602081"
    "1015610a9557600080fd5b810190808051906020019092919050505090505b91905056fe"
    "4e6f7420617574686f72697a656420746f2075706461746520636f6e7472616374207265"
    "6769737472792e4d7573742068617665206174206c65617374206f6e6520726567697374"
    "6572656420636f6e747261637420746f20657865637574652064656c657465206f706572"
    "6174696f6e2e436f6e74726163742061646472657373206d757374206e6f74206265207a"
    "65726f2ea265627a7a723058206703bdfb54a7a3eb61936f024bb43f91b3a8ce1448dc4d"
    "9593458137e30b983f64736f6c63430005090032"
)
